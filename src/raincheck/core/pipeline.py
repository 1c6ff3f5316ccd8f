"""
Recálculo completo: unión de lotes y segmentación.
"""

from typing import Iterable, Sequence

from raincheck.config import AnalysisSettings
from raincheck.core.merge import merge_points
from raincheck.core.segmentation import segment_events
from raincheck.models import RainPoint, StormEvent


def analyze(
    existing: Sequence[RainPoint],
    incoming: Iterable[RainPoint],
    settings: AnalysisSettings,
) -> tuple[list[RainPoint], list[StormEvent]]:
    """
    Une el lote entrante y re-segmenta la serie completa.

    No hay re-segmentación incremental: cada llamada recorre todos
    los puntos retenidos.

    Returns:
        (serie unida, eventos)
    """
    merged = merge_points(existing, incoming)
    events = segment_events(
        merged, settings.ietd_hours, settings.min_rainfall_threshold
    )
    return merged, events
