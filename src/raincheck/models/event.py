"""
Modelo para eventos de tormenta observados.
"""

from datetime import datetime

from pydantic import Field

from raincheck.config import MS_PER_HOUR, RETURN_PERIOD_PLACEHOLDER
from raincheck.models.base import FrozenModel, generate_id, ms_to_datetime


class StormEvent(FrozenModel):
    """
    Evento de tormenta derivado de la serie de puntos.

    recurrence_intervals y max_return_period quedan como marcadores
    hasta que exista una asignación de período de retorno (IDF).
    """

    id: str = Field(default_factory=generate_id)
    start_date: int  # ms del primer punto
    end_date: int    # ms del último punto
    total_depth: float
    peak_intensities: dict[str, float] = Field(default_factory=dict)
    recurrence_intervals: dict[str, str] = Field(default_factory=dict)
    max_return_period: str = RETURN_PERIOD_PLACEHOLDER

    @property
    def duration_hr(self) -> float:
        """Duración entre el primer y el último punto (hr)."""
        return (self.end_date - self.start_date) / MS_PER_HOUR

    @property
    def start_datetime(self) -> datetime:
        return ms_to_datetime(self.start_date)

    @property
    def end_datetime(self) -> datetime:
        return ms_to_datetime(self.end_date)

    def peak(self, label: str) -> float:
        """Intensidad pico para una duración, 0 si no fue calculada."""
        return self.peak_intensities.get(label, 0.0)
