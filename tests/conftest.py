"""Configuración de pytest para tests de raincheck."""

import pytest

from raincheck.ingest import local_timestamp_ms
from raincheck.models import RainPoint


HOUR = 3600 * 1000


def _build_points(offsets_ms, value=0.5, base=0, source_id="1"):
    return [
        RainPoint(timestamp=base + offset, value=value, source_id=source_id)
        for offset in offsets_ms
    ]


@pytest.fixture
def make_points():
    """Fábrica de puntos a partir de desfasajes en ms."""
    return _build_points


@pytest.fixture
def base_time():
    """2023-01-01 00:00 en hora local (ms)."""
    return local_timestamp_ms(2023, 1, 1, 0, 0)


@pytest.fixture
def two_storm_points(base_time):
    """Dos tormentas de 1.0 in separadas por 7 horas secas."""
    return _build_points([0, 1 * HOUR, 8 * HOUR, 9 * HOUR], base=base_time)


@pytest.fixture
def dat_text():
    """Archivo SWMM .dat de ejemplo."""
    return "\n".join([
        ";Rainfall data",
        ";Station Year Month Day Hour Minute Value",
        "A-22_M-43_Rain 2022 3 1 0 0 0.10",
        "A-22_M-43_Rain 2022 3 1 0 15 0.20",
        "",
        "A-22_M-43_Rain 2022 3 1 12 0 0.30",
    ])


@pytest.fixture
def tsf_text():
    """Archivo SWMM .tsf de ejemplo."""
    return "\n".join([
        "IDs:\tA-22",
        "Date/Time\tRainfall",
        "M/d/yyyy\tin",
        "3/1/2022 12:05:00 AM\t0.01",
        "3/1/2022 12:10:00 AM\t0.02",
        "3/1/2022 12:15:00 AM\t0.03",
    ])


@pytest.fixture
def csv_text():
    """CSV genérico con columnas Timestamp y Value."""
    return "\n".join([
        "Timestamp,Value",
        "2023-01-01 00:00,0.50",
        "2023-01-01 01:00,0.50",
        "2023-01-01 08:00,0.50",
        "2023-01-01 09:00,0.50",
    ])
