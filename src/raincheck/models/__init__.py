"""
Modelos de datos para RainCheck.

Este módulo contiene los modelos Pydantic utilizados en la aplicación.
"""

from raincheck.models.base import FrozenModel, generate_id, ms_to_datetime
from raincheck.models.point import RainPoint
from raincheck.models.event import StormEvent

__all__ = [
    # Clases base
    "FrozenModel",
    "generate_id",
    "ms_to_datetime",
    # Serie y eventos
    "RainPoint",
    "StormEvent",
]
