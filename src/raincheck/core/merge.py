"""
Unión de lotes de mediciones sin duplicados.
"""

from typing import Iterable, Sequence

from raincheck.models import RainPoint


def merge_points(
    existing: Sequence[RainPoint],
    incoming: Iterable[RainPoint],
) -> list[RainPoint]:
    """
    Une un lote nuevo de puntos con la serie acumulada.

    La clave de unicidad es el timestamp. Ante una colisión siempre
    se conserva el punto existente; los puntos entrantes solo ocupan
    instantes libres.

    Args:
        existing: Serie acumulada (ordenada)
        incoming: Puntos recién ingeridos

    Returns:
        Nueva lista ordenada ascendentemente por timestamp
    """
    by_timestamp: dict[int, RainPoint] = {p.timestamp: p for p in existing}

    for point in incoming:
        by_timestamp.setdefault(point.timestamp, point)

    return sorted(by_timestamp.values(), key=lambda p: p.timestamp)
