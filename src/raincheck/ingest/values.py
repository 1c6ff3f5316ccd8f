"""
Conversión tolerante de campos de texto a números y fechas.

Los valores se leen por prefijo numérico ("0.25in" -> 0.25). Un campo
que no empieza con un número se considera inválido y devuelve None.
"""

import re
import warnings
from datetime import datetime, timedelta
from typing import Optional

import pandas as pd


_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")


def parse_float(text: Optional[str]) -> Optional[float]:
    """Lee el prefijo numérico de un campo, None si no hay número."""
    if text is None:
        return None
    match = _FLOAT_PREFIX.match(str(text))
    if match is None:
        return None
    return float(match.group())


def parse_int(text: Optional[str]) -> Optional[int]:
    """Lee el prefijo entero de un campo, None si no hay número."""
    if text is None:
        return None
    match = _INT_PREFIX.match(str(text))
    if match is None:
        return None
    return int(match.group())


def local_timestamp_ms(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
) -> Optional[int]:
    """
    Timestamp en ms para una fecha de calendario en hora local.

    Los campos fuera de rango se trasladan al siguiente: la hora 24 es
    las 00:00 del día siguiente, el 30 de febrero es el 2 o 1 de marzo y
    el mes 13 es enero del año siguiente.

    Args:
        month: Mes, 1-12 o desbordado

    Returns:
        ms desde epoch, None si el año queda fuera del rango representable
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        moment = datetime(year, month, 1) + timedelta(
            days=day - 1, hours=hour, minutes=minute
        )
        return round(moment.timestamp() * 1000)
    except (ValueError, OverflowError, OSError):
        return None


def parse_datetime_ms(text: Optional[str]) -> Optional[int]:
    """
    Interpreta una fecha en formato libre con pandas.

    Las fechas sin zona horaria se toman en hora local.

    Returns:
        ms desde epoch, None si el texto no es una fecha
    """
    if text is None or not str(text).strip():
        return None

    try:
        with warnings.catch_warnings():
            # pandas avisa cuando infiere el orden día/mes
            warnings.simplefilter("ignore", UserWarning)
            parsed = pd.to_datetime(str(text).strip())
    except (ValueError, TypeError, OverflowError):
        return None

    if pd.isna(parsed):
        return None

    try:
        return round(parsed.to_pydatetime().timestamp() * 1000)
    except (ValueError, OverflowError, OSError):
        return None
