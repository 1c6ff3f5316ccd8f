"""
Validadores centralizados para entradas CLI.

Proporciona funciones de validación con mensajes de error consistentes.
"""

from pathlib import Path

import typer

from raincheck.cli.theme import print_error


def validate_ietd(value: float, exit_on_error: bool = True) -> bool:
    """
    Valida que el IETD sea positivo.

    Args:
        value: IETD en horas
        exit_on_error: Si True, termina el programa con error

    Returns:
        True si es válido, False si no
    """
    if value <= 0:
        print_error(f"IETD debe ser positivo (recibido: {value} hr)")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_threshold(value: float, exit_on_error: bool = True) -> bool:
    """Valida que el umbral de lámina mínima no sea negativo."""
    if value < 0:
        print_error(f"El umbral no puede ser negativo (recibido: {value} in)")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_input_files(paths: list[Path], exit_on_error: bool = True) -> bool:
    """Valida que todos los archivos de entrada existan."""
    missing = [path for path in paths if not path.is_file()]
    for path in missing:
        print_error(f"Archivo no encontrado: {path}")
    if missing:
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True
