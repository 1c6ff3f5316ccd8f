"""
Ingesta de archivos de lluvia.

Formatos soportados:
- CSV genérico (con o sin encabezados)
- SWMM .dat (columnas separadas por espacios)
- SWMM .tsf (serie temporal separada por tabuladores)
"""

from raincheck.ingest.dialects import (
    PARSERS,
    detect_dialect,
    normalize_extension,
    parse_rain_file,
    parse_rain_text,
)
from raincheck.ingest.csv_table import parse_csv_table
from raincheck.ingest.swmm import parse_swmm_dat, parse_swmm_tsf
from raincheck.ingest.values import (
    local_timestamp_ms,
    parse_datetime_ms,
    parse_float,
    parse_int,
)

__all__ = [
    # Despacho por formato
    "PARSERS",
    "detect_dialect",
    "normalize_extension",
    "parse_rain_file",
    "parse_rain_text",
    # Lectores
    "parse_csv_table",
    "parse_swmm_dat",
    "parse_swmm_tsf",
    # Conversión de campos
    "local_timestamp_ms",
    "parse_datetime_ms",
    "parse_float",
    "parse_int",
]
