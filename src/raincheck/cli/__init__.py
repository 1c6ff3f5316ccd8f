"""
CLI de RainCheck - Eventos de tormenta a partir de registros de lluvia.

Comandos:
- events: Identifica eventos y exporta resultados
- peaks: Intensidades pico por duración
- parse: Diagnóstico de lectura de un archivo
"""

from typing import Annotated

import typer

from raincheck import __version__
from raincheck.cli.analysis import events, parse, peaks
from raincheck.cli.theme import configure_console

# Crear aplicación principal
app = typer.Typer(
    name="raincheck",
    help="Segmentación de eventos de tormenta e intensidades pico.",
    no_args_is_help=True,
)

app.command("events")(events)
app.command("peaks")(peaks)
app.command("parse")(parse)


def _version_callback(value: bool):
    if value:
        typer.echo(f"raincheck {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    no_color: Annotated[bool, typer.Option("--no-color", help="Salida sin colores")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Muestra la versión"),
    ] = False,
):
    """
    RainCheck - Eventos de tormenta para evaluación hidrológica.

    Lee archivos CSV, SWMM .dat y .tsf, separa eventos por IETD
    y calcula intensidades pico de 15 min a 24 hr.
    """
    configure_console(no_color=no_color)


__all__ = [
    "app",
]
