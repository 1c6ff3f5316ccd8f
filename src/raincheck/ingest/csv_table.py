"""
Lector de CSV genérico con fila de encabezados.

Cada fila se interpreta con estrategias en orden de prioridad:

1. Columnas detalladas Year/Month/Day/Hour/Minute con el valor en la
   primera columna disponible de DETAILED_VALUE_COLUMNS.
2. Primera columna cuyo nombre coincide con TIME_COLUMN_PATTERN
   (fecha libre) y primera que coincide con VALUE_COLUMN_PATTERN.

Si ninguna fila produce un punto válido se asume un archivo sin
encabezados: la fila leída como encabezado es el primer dato y las
demás filas se leen por posición (fecha, valor).
"""

import io
import re
import warnings
from typing import Optional

import pandas as pd

from raincheck.ingest.values import (
    local_timestamp_ms,
    parse_datetime_ms,
    parse_float,
    parse_int,
)
from raincheck.models import RainPoint


DETAILED_DATE_COLUMNS = ("Year", "Month", "Day", "Hour", "Minute")
DETAILED_VALUE_COLUMNS = ("Rain(inch)", "Rain", "Value")

TIME_COLUMN_PATTERN = re.compile(r"date|time|timestamp", re.IGNORECASE)
VALUE_COLUMN_PATTERN = re.compile(r"value|rain|depth", re.IGNORECASE)


def read_csv_rows(text: str) -> tuple[list[str], list[list[str]]]:
    """
    Lee el texto como tabla de strings.

    Las filas con más campos que el encabezado conservan los campos
    nombrados y descartan los sobrantes.

    Returns:
        (encabezados, filas) con todas las celdas como texto
    """
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", pd.errors.ParserWarning)
            df = pd.read_csv(
                io.StringIO(text),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                index_col=False,
                engine="python",
            )
    except (pd.errors.EmptyDataError, pd.errors.ParserError):
        return [], []

    df = df.fillna("")
    return [str(c) for c in df.columns], df.values.tolist()


def _first_matching(columns: list[str], pattern: re.Pattern) -> Optional[str]:
    for column in columns:
        if pattern.search(column):
            return column
    return None


def _first_present(columns: list[str], candidates: tuple[str, ...]) -> Optional[str]:
    for candidate in candidates:
        if candidate in columns:
            return candidate
    return None


def _detailed_timestamp(row: dict[str, str]) -> Optional[int]:
    """Timestamp desde columnas Year/Month/Day/Hour/Minute (mes 1-12)."""
    if not all(row.get(column) for column in DETAILED_DATE_COLUMNS):
        return None

    fields = [parse_int(row[column]) for column in DETAILED_DATE_COLUMNS]
    if None in fields:
        return None

    year, month, day, hour, minute = fields
    return local_timestamp_ms(year, month, day, hour, minute)


def parse_csv_table(text: str, source_id: str) -> list[RainPoint]:
    """
    Lee un CSV de lluvia con encabezados.

    Args:
        text: Contenido del archivo
        source_id: Identificador del origen (nombre de archivo)

    Returns:
        Lista de RainPoint en el orden del archivo
    """
    columns, rows = read_csv_rows(text)
    if not columns:
        return []

    has_detailed = all(column in columns for column in DETAILED_DATE_COLUMNS)
    detailed_value_column = _first_present(columns, DETAILED_VALUE_COLUMNS)
    time_column = _first_matching(columns, TIME_COLUMN_PATTERN)
    value_column = _first_matching(columns, VALUE_COLUMN_PATTERN)

    points = []
    for cells in rows:
        row = dict(zip(columns, cells))
        timestamp = None
        value = None

        if has_detailed:
            timestamp = _detailed_timestamp(row)
            if timestamp is not None and detailed_value_column is not None:
                value = parse_float(row[detailed_value_column])

        if timestamp is None and time_column is not None:
            timestamp = parse_datetime_ms(row[time_column])

        if value is None and value_column is not None:
            value = parse_float(row[value_column])

        if timestamp is not None and timestamp > 0 and value is not None:
            points.append(RainPoint(timestamp=timestamp, value=value, source_id=source_id))

    if not points:
        points = _parse_headerless(columns, rows, source_id)

    return points


def _parse_headerless(
    columns: list[str],
    rows: list[list[str]],
    source_id: str,
) -> list[RainPoint]:
    """
    Relee la tabla como "fecha,valor" por posición.

    La fila de encabezados se recupera como primer dato solo si su
    primera celda es una fecha.
    """
    if len(columns) < 2:
        return []

    first_timestamp = parse_datetime_ms(columns[0])
    if first_timestamp is None:
        return []

    points = []
    first_value = parse_float(columns[1])
    if first_value is not None:
        points.append(RainPoint(timestamp=first_timestamp, value=first_value, source_id=source_id))

    for cells in rows:
        if len(cells) < 2:
            continue
        timestamp = parse_datetime_ms(cells[0])
        value = parse_float(cells[1])
        if timestamp is not None and value is not None:
            points.append(RainPoint(timestamp=timestamp, value=value, source_id=source_id))

    return points
