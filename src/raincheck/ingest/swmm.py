"""
Lectores para archivos de lluvia de SWMM.

- .dat: columnas separadas por espacios
  (Estación Año Mes Día Hora Minuto Valor), comentarios con ';'
- .tsf: serie temporal exportada, encabezados y luego
  "Fecha<TAB>Valor"

Las líneas que no se pueden interpretar se omiten sin error.
"""

import re
from typing import Iterable

from raincheck.ingest.values import (
    local_timestamp_ms,
    parse_datetime_ms,
    parse_float,
    parse_int,
)
from raincheck.models import RainPoint


DAT_COMMENT = ";"
DAT_MIN_FIELDS = 7

TSF_HEADER_PREFIXES = ("IDs:", "Date/Time", "M/d/yyyy")

_TABS = re.compile(r"\t+")


def parse_swmm_dat(lines: Iterable[str], source_id: str) -> list[RainPoint]:
    """
    Lee un archivo SWMM .dat.

    Ejemplo de línea:
        A-22_M-43_Rain 2022 3 1 0 0 0.01

    Args:
        lines: Líneas del archivo
        source_id: Identificador del origen (nombre de archivo)

    Returns:
        Lista de RainPoint en el orden del archivo
    """
    points = []

    for line in lines:
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(DAT_COMMENT):
            continue

        parts = trimmed.split()
        if len(parts) < DAT_MIN_FIELDS:
            continue

        year = parse_int(parts[1])
        month = parse_int(parts[2])
        day = parse_int(parts[3])
        hour = parse_int(parts[4])
        minute = parse_int(parts[5])
        value = parse_float(parts[6])

        if None in (year, month, day, hour, minute, value):
            continue

        timestamp = local_timestamp_ms(year, month, day, hour, minute)
        if timestamp is None:
            continue

        points.append(RainPoint(timestamp=timestamp, value=value, source_id=source_id))

    return points


def parse_swmm_tsf(lines: Iterable[str], source_id: str) -> list[RainPoint]:
    """
    Lee un archivo SWMM .tsf.

    Formato típico:
        IDs:	A-22
        Date/Time	Rainfall
        M/d/yyyy	in
        3/1/2022 12:05:00 AM	0.01
    """
    points = []

    for line in lines:
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(TSF_HEADER_PREFIXES):
            continue

        parts = _TABS.split(trimmed)
        if len(parts) < 2:
            continue

        timestamp = parse_datetime_ms(parts[0])
        value = parse_float(parts[1])

        if timestamp is None or value is None:
            continue

        points.append(RainPoint(timestamp=timestamp, value=value, source_id=source_id))

    return points
