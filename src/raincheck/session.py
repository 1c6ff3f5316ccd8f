"""
Sesión de análisis de lluvia.

Mantiene la serie acumulada, la configuración y los eventos derivados.
Cada modificación de la serie o de los parámetros de segmentación
dispara un recálculo completo.
"""

import warnings
from pathlib import Path
from typing import Iterable, Optional, Union

from pydantic import BaseModel

from raincheck.config import AnalysisSettings, RETURN_PERIOD_PLACEHOLDER
from raincheck.core import analyze, segment_events
from raincheck.ingest import parse_rain_file, parse_rain_text
from raincheck.models import RainPoint, StormEvent


class SessionSummary(BaseModel):
    """Resumen de la sesión para el tablero."""
    point_count: int
    total_rainfall: float       # in, sobre todos los puntos
    event_count: int
    max_return_period: str      # "-" sin eventos
    largest_event_depth: float  # in
    max_peak_1hr: float         # in


class RainfallSession:
    """
    Estado de un análisis: puntos, configuración y eventos.

    Ejemplo:
        session = RainfallSession()
        session.add_file("gauge.csv")
        session.update_settings(ietd_hours=12)
        for event in session.events:
            ...
    """

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self.settings = settings or AnalysisSettings()
        self.points: list[RainPoint] = []
        self.events: list[StormEvent] = []

    def add_points(self, points: Iterable[RainPoint]) -> None:
        """Une un lote de puntos y re-segmenta la serie completa."""
        self.points, self.events = analyze(self.points, points, self.settings)

    def add_text(
        self,
        text: str,
        source_id: str,
        extension: Optional[str] = None,
    ) -> int:
        """
        Ingiere el contenido de un archivo.

        Returns:
            Cantidad de puntos leídos del archivo
        """
        points = parse_rain_text(text, source_id, extension)
        return self._add_parsed(points, source_id)

    def add_file(self, path: Union[str, Path], extension: Optional[str] = None) -> int:
        """
        Ingiere un archivo del disco.

        Returns:
            Cantidad de puntos leídos del archivo
        """
        points = parse_rain_file(path, extension)
        return self._add_parsed(points, Path(path).name)

    def _add_parsed(self, points: list[RainPoint], source_id: str) -> int:
        if not points:
            warnings.warn(
                f"{source_id}: no se encontraron mediciones válidas",
                UserWarning,
            )
            return 0

        self.add_points(points)
        return len(points)

    def update_settings(self, **changes) -> bool:
        """
        Actualiza la configuración.

        Solo re-segmenta si cambió ietd_hours o min_rainfall_threshold.

        Returns:
            True si se recalcularon los eventos
        """
        updated = AnalysisSettings(**{**self.settings.model_dump(), **changes})
        needs_recalc = (
            updated.ietd_hours != self.settings.ietd_hours
            or updated.min_rainfall_threshold != self.settings.min_rainfall_threshold
        )

        self.settings = updated

        if needs_recalc:
            self.events = segment_events(
                self.points, updated.ietd_hours, updated.min_rainfall_threshold
            )
        return needs_recalc

    def clear(self) -> None:
        """Descarta puntos y eventos; conserva la configuración."""
        self.points = []
        self.events = []

    def summary(self) -> SessionSummary:
        """Calcula el resumen de la sesión."""
        events = self.events
        return SessionSummary(
            point_count=len(self.points),
            total_rainfall=sum(p.value for p in self.points),
            event_count=len(events),
            max_return_period=RETURN_PERIOD_PLACEHOLDER if events else "-",
            largest_event_depth=max((e.total_depth for e in events), default=0.0),
            max_peak_1hr=max((e.peak("1hr") for e in events), default=0.0),
        )
