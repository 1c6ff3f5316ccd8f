"""
Segmentación de la serie de lluvia en eventos de tormenta.

Un evento es una corrida maximal de puntos sin huecos internos mayores
al IETD (Inter-Event Time Definition). Un hueco exactamente igual al
IETD no separa eventos.
"""

from typing import Iterable

from raincheck.config import MS_PER_HOUR, RETURN_PERIOD_PLACEHOLDER
from raincheck.core.intensity import calculate_rolling_peaks
from raincheck.models import RainPoint, StormEvent


def segment_events(
    points: Iterable[RainPoint],
    ietd_hours: float,
    min_threshold: float,
) -> list[StormEvent]:
    """
    Separa la serie en eventos según el período seco IETD.

    Los puntos se ordenan por timestamp antes de recorrerlos, por lo
    que se admite entrada desordenada. Los eventos con lámina total
    menor a min_threshold se descartan.

    Args:
        points: Serie de mediciones
        ietd_hours: Período seco mínimo entre eventos (hr)
        min_threshold: Lámina total mínima de un evento (in)

    Returns:
        Lista de StormEvent en orden cronológico
    """
    ordered = sorted(points, key=lambda p: p.timestamp)
    ietd_ms = ietd_hours * MS_PER_HOUR

    events: list[StormEvent] = []
    run: list[RainPoint] = []

    for point in ordered:
        if run and point.timestamp - run[-1].timestamp > ietd_ms:
            event = build_event(run, min_threshold)
            if event is not None:
                events.append(event)
            run = []
        run.append(point)

    if run:
        event = build_event(run, min_threshold)
        if event is not None:
            events.append(event)

    return events


def build_event(run: list[RainPoint], min_threshold: float) -> StormEvent | None:
    """
    Cierra una corrida de puntos y construye el evento.

    Returns:
        StormEvent, o None si la lámina total es menor al umbral
    """
    total_depth = sum(p.value for p in run)

    if total_depth < min_threshold:
        return None

    return StormEvent(
        start_date=run[0].timestamp,
        end_date=run[-1].timestamp,
        total_depth=total_depth,
        peak_intensities=calculate_rolling_peaks(run),
        recurrence_intervals={},
        max_return_period=RETURN_PERIOD_PLACEHOLDER,
    )
