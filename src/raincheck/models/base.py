"""
Clases base para modelos Pydantic.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict


def generate_id() -> str:
    """Genera un ID único de 128 bits (uuid4 en hexadecimal)."""
    return uuid.uuid4().hex


def ms_to_datetime(timestamp_ms: int) -> datetime:
    """Convierte milisegundos desde epoch a datetime en hora local."""
    return datetime.fromtimestamp(timestamp_ms / 1000)


class FrozenModel(BaseModel):
    """
    Modelo base inmutable.

    Los puntos y eventos no se modifican una vez creados.
    """

    model_config = ConfigDict(frozen=True)
