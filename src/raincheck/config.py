"""Modelos Pydantic para configuración del análisis de eventos."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# Valores por defecto del análisis
DEFAULT_IETD_HOURS = 6.0
DEFAULT_MIN_RAINFALL_THRESHOLD = 0.1  # pulgadas

MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE

# Duraciones estándar para intensidades pico: (etiqueta, milisegundos)
STANDARD_DURATIONS: tuple[tuple[str, int], ...] = (
    ("15min", 15 * MS_PER_MINUTE),
    ("1hr", 1 * MS_PER_HOUR),
    ("2hr", 2 * MS_PER_HOUR),
    ("6hr", 6 * MS_PER_HOUR),
    ("12hr", 12 * MS_PER_HOUR),
    ("24hr", 24 * MS_PER_HOUR),
)

DURATION_LABELS: tuple[str, ...] = tuple(label for label, _ in STANDARD_DURATIONS)

# Marcador de severidad mientras no exista cálculo de período de retorno
RETURN_PERIOD_PLACEHOLDER = "N/A"


class Dialect(str, Enum):
    """Formatos de archivo de lluvia reconocidos."""
    SWMM_DAT = "swmm_dat"
    SWMM_TSF = "swmm_tsf"
    CSV = "csv"


class ExportFormat(str, Enum):
    """Formatos de exportación de eventos."""
    CSV = "csv"
    JSON = "json"


class AnalysisSettings(BaseModel):
    """
    Parámetros de segmentación de eventos.

    Cambiar cualquiera de los dos valores obliga a re-segmentar
    la serie completa de puntos.
    """
    model_config = ConfigDict(extra="forbid")

    ietd_hours: float = Field(
        default=DEFAULT_IETD_HOURS, gt=0,
        description="Período seco mínimo entre eventos (hr)",
    )
    min_rainfall_threshold: float = Field(
        default=DEFAULT_MIN_RAINFALL_THRESHOLD, ge=0,
        description="Profundidad mínima de un evento (in)",
    )
