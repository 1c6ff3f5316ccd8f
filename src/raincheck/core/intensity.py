"""
Intensidades pico por ventana móvil.

Cada punto se trata como un impulso instantáneo: la lámina se asigna
al instante de la medición, sin interpolar sobre un intervalo. Para
cada duración D se busca la máxima suma de valores cuyos timestamps
caben en una ventana de largo D, con los extremos incluidos.
"""

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from raincheck.config import STANDARD_DURATIONS
from raincheck.models import RainPoint


def rolling_max(
    timestamps: ArrayLike,
    values: ArrayLike,
    duration_ms: float,
) -> float:
    """
    Máxima lámina acumulada en cualquier ventana de duración dada.

    Para cada punto como extremo derecho, searchsorted ubica el primer
    punto a no más de duration_ms hacia atrás y la suma de la ventana
    sale de la diferencia de sumas acumuladas. Dos puntos separados
    exactamente duration_ms suman en la misma ventana.

    Args:
        timestamps: Instantes en ms, ordenados ascendentemente
        values: Láminas (in) de cada instante
        duration_ms: Largo de la ventana (ms)

    Returns:
        Lámina máxima (in), 0 si no hay puntos
    """
    t = np.asarray(timestamps, dtype=np.int64)
    v = np.asarray(values, dtype=float)

    if t.size == 0:
        return 0.0

    cumulative = np.concatenate(([0.0], np.cumsum(v)))
    left = np.searchsorted(t, t - duration_ms, side="left")
    window_sums = cumulative[1:] - cumulative[left]

    return float(max(window_sums.max(), 0.0))


def calculate_rolling_peaks(points: Sequence[RainPoint]) -> dict[str, float]:
    """
    Calcula las intensidades pico de un evento para las duraciones estándar.

    Args:
        points: Puntos de un único evento, ordenados por timestamp

    Returns:
        Diccionario etiqueta -> lámina máxima (in), p.ej. {"1hr": 1.45}
    """
    timestamps = np.fromiter((p.timestamp for p in points), dtype=np.int64, count=len(points))
    values = np.fromiter((p.value for p in points), dtype=float, count=len(points))

    return {
        label: rolling_max(timestamps, values, duration_ms)
        for label, duration_ms in STANDARD_DURATIONS
    }
