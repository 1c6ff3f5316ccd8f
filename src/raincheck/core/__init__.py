"""Módulos de cálculo: unión de series, segmentación e intensidades."""

from raincheck.core.merge import merge_points
from raincheck.core.intensity import calculate_rolling_peaks, rolling_max
from raincheck.core.segmentation import build_event, segment_events
from raincheck.core.pipeline import analyze

__all__ = [
    # Unión
    "merge_points",
    # Intensidades
    "calculate_rolling_peaks",
    "rolling_max",
    # Segmentación
    "build_event",
    "segment_events",
    # Recálculo completo
    "analyze",
]
