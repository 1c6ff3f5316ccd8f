"""
Detección de formato y normalización de archivos de lluvia.
"""

from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from raincheck.config import Dialect
from raincheck.ingest.csv_table import parse_csv_table
from raincheck.ingest.swmm import DAT_COMMENT, parse_swmm_dat, parse_swmm_tsf
from raincheck.models import RainPoint


TSF_MARKERS = ("IDs:", "Date/Time")


def _csv_from_lines(lines: Iterable[str], source_id: str) -> list[RainPoint]:
    return parse_csv_table("\n".join(lines), source_id)


# Lector asociado a cada formato
PARSERS: dict[Dialect, Callable[[Iterable[str], str], list[RainPoint]]] = {
    Dialect.SWMM_DAT: parse_swmm_dat,
    Dialect.SWMM_TSF: parse_swmm_tsf,
    Dialect.CSV: _csv_from_lines,
}


def normalize_extension(extension: Optional[str], source_id: str = "") -> str:
    """Extensión en minúsculas sin punto; se deduce de source_id si falta."""
    if extension:
        return extension.lower().lstrip(".")
    return Path(source_id).suffix.lower().lstrip(".")


def detect_dialect(text: str, extension: Optional[str] = None) -> Dialect:
    """
    Determina el formato del archivo.

    Prioridad:
        1. extensión .dat o texto que empieza con ';' -> SWMM .dat
        2. extensión .tsf o marcadores 'IDs:' / 'Date/Time' -> SWMM .tsf
        3. CSV genérico
    """
    ext = (extension or "").lower().lstrip(".")

    if ext == "dat" or text.strip().startswith(DAT_COMMENT):
        return Dialect.SWMM_DAT
    if ext == "tsf" or any(marker in text for marker in TSF_MARKERS):
        return Dialect.SWMM_TSF
    return Dialect.CSV


def parse_rain_text(
    text: str,
    source_id: str,
    extension: Optional[str] = None,
) -> list[RainPoint]:
    """
    Convierte el texto de un archivo de lluvia en puntos normalizados.

    Las líneas o filas inválidas se omiten; un archivo sin ningún
    punto válido devuelve una lista vacía.

    Args:
        text: Contenido del archivo
        source_id: Identificador del origen (nombre de archivo)
        extension: Extensión del archivo, opcional

    Returns:
        Lista de RainPoint ordenada por timestamp
    """
    if not text:
        return []

    dialect = detect_dialect(text, normalize_extension(extension, source_id))
    points = PARSERS[dialect](text.splitlines(), source_id)

    return sorted(points, key=lambda p: p.timestamp)


def parse_rain_file(
    path: Union[str, Path],
    extension: Optional[str] = None,
) -> list[RainPoint]:
    """
    Lee y normaliza un archivo de lluvia del disco.

    El nombre del archivo se usa como source_id.

    Raises:
        OSError: Si el archivo no se puede leer
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8-sig", errors="replace")
    return parse_rain_text(text, path.name, extension or path.suffix)
