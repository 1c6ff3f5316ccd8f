"""
Exportación de puntos y eventos a CSV y JSON.
"""

import json
from pathlib import Path
from typing import Sequence

import pandas as pd

from raincheck.config import DURATION_LABELS
from raincheck.models import RainPoint, StormEvent


EVENT_COLUMNS = [
    "id",
    "start",
    "end",
    "duration_hr",
    "total_depth_in",
    *[f"peak_{label}_in" for label in DURATION_LABELS],
    "max_return_period",
]


def events_to_dataframe(events: Sequence[StormEvent]) -> pd.DataFrame:
    """Tabla de eventos, una fila por evento."""
    rows = []
    for event in events:
        row = {
            "id": event.id,
            "start": event.start_datetime.isoformat(),
            "end": event.end_datetime.isoformat(),
            "duration_hr": round(event.duration_hr, 3),
            "total_depth_in": event.total_depth,
        }
        for label in DURATION_LABELS:
            row[f"peak_{label}_in"] = event.peak(label)
        row["max_return_period"] = event.max_return_period
        rows.append(row)

    return pd.DataFrame(rows, columns=EVENT_COLUMNS)


def points_to_dataframe(points: Sequence[RainPoint]) -> pd.DataFrame:
    """Tabla de mediciones con fecha local legible."""
    rows = [
        {
            "datetime": p.as_datetime.isoformat(),
            "timestamp_ms": p.timestamp,
            "value_in": p.value,
            "source": p.source_id,
        }
        for p in points
    ]
    return pd.DataFrame(rows, columns=["datetime", "timestamp_ms", "value_in", "source"])


def events_to_csv(events: Sequence[StormEvent], filepath: str | Path) -> None:
    """Exporta eventos a CSV."""
    events_to_dataframe(events).to_csv(filepath, index=False)


def points_to_csv(points: Sequence[RainPoint], filepath: str | Path) -> None:
    """Exporta la serie de puntos a CSV."""
    points_to_dataframe(points).to_csv(filepath, index=False)


def events_to_json(events: Sequence[StormEvent], filepath: str | Path) -> None:
    """Exporta eventos a JSON (lista de objetos)."""
    data = [event.model_dump() for event in events]
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
