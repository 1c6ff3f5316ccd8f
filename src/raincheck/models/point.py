"""
Modelo para una medición de precipitación.
"""

from datetime import datetime

from raincheck.models.base import FrozenModel, ms_to_datetime


class RainPoint(FrozenModel):
    """Medición puntual de lluvia."""

    timestamp: int  # ms desde epoch
    value: float    # profundidad (in)
    source_id: str  # archivo u origen de la medición

    @property
    def as_datetime(self) -> datetime:
        """Instante de la medición en hora local."""
        return ms_to_datetime(self.timestamp)
