"""
Salida de consola para la CLI de RainCheck.

Una única consola Rich con estilos nombrados por lo que muestran:
láminas, unidades, fechas y el valor crítico de cada tabla.
"""

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from raincheck.config import DURATION_LABELS
from raincheck.models import StormEvent


RAIN_THEME = Theme({
    "title": "bold #5f87af",
    "subtitle": "#808080",
    "border": "#5f5f5f",
    "label": "#afafaf",
    "depth": "bold #d7af5f",
    "unit": "#87af87",
    "date": "#87afaf",
    "critical": "bold #d75f5f",
    "success": "#87af87",
    "warning": "#d7af5f",
    "error": "#d75f5f",
    "info": "#5f87af",
})

_console: Optional[Console] = None


def configure_console(no_color: bool = False) -> Console:
    """Crea la consola de la sesión; no_color deja solo texto plano."""
    global _console
    _console = Console(theme=RAIN_THEME, no_color=no_color, highlight=False)
    return _console


def get_console() -> Console:
    """Consola activa, creada con colores si aún no existe."""
    if _console is None:
        return configure_console()
    return _console


def format_depth(value: float, decimals: int = 2) -> str:
    """Formatea una lámina (in) con precisión fija."""
    if abs(value) >= 1000:
        return f"{value:,.{decimals}f}"
    return f"{value:.{decimals}f}"


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado en recuadro."""
    content = Text(text, style="title")
    if subtitle:
        content.append(f"\n{subtitle}", style="subtitle")
    get_console().print(Panel(content, border_style="border", box=box.ROUNDED, padding=(0, 2)))


def print_field(label: str, value, unit: str = None, indent: int = 2) -> None:
    """Imprime "etiqueta: valor unidad"."""
    text = Text(" " * indent)
    text.append(f"{label}: ", style="label")
    text.append(str(value), style="depth")
    if unit:
        text.append(f" {unit}", style="unit")
    get_console().print(text)


def print_separator(width: int = 60) -> None:
    get_console().print("-" * width, style="border")


def print_success(text: str) -> None:
    get_console().print(Text(f"[+] {text}", style="success"))


def print_warning(text: str) -> None:
    get_console().print(Text(f"[!] {text}", style="warning"))


def print_error(text: str) -> None:
    get_console().print(Text(f"[x] {text}", style="error"))


def print_info(text: str) -> None:
    get_console().print(Text(f"[i] {text}", style="info"))


def _events_table(title: str, columns: list[tuple[str, str]]) -> Table:
    table = Table(
        title=title,
        title_style="title",
        border_style="border",
        header_style="label",
        box=box.ROUNDED,
        padding=(0, 1),
    )
    for name, justify in columns:
        table.add_column(name, justify=justify)
    return table


def _depth_cell(value: float, critical: bool) -> Text:
    return Text(format_depth(value), style="critical" if critical else "depth")


def print_events_table(events: Sequence[StormEvent], title: str = None) -> None:
    """
    Imprime el resumen de eventos.

    La lámina del evento mayor se resalta como crítica.
    """
    table = _events_table(
        title or f"Eventos identificados ({len(events)})",
        [
            ("#", "right"),
            ("Inicio", "left"),
            ("Duracion", "right"),
            ("Lamina (in)", "right"),
            ("Pico 1hr (in)", "right"),
            ("Periodo retorno", "center"),
        ],
    )
    largest = max((event.total_depth for event in events), default=0.0)

    for i, event in enumerate(events, start=1):
        table.add_row(
            str(i),
            Text(f"{event.start_datetime:%Y-%m-%d %H:%M}", style="date"),
            f"{event.duration_hr:.1f} hr",
            _depth_cell(event.total_depth, event.total_depth == largest),
            _depth_cell(event.peak("1hr"), False),
            Text(event.max_return_period, style="subtitle"),
        )

    get_console().print(table)


def print_peaks_table(events: Sequence[StormEvent], title: str = None) -> None:
    """
    Imprime las intensidades pico de cada evento para las seis duraciones.

    En cada columna se resalta el evento crítico para esa duración.
    """
    columns = [("#", "right"), ("Inicio", "left")]
    columns.extend((label, "right") for label in DURATION_LABELS)
    table = _events_table(title or "Intensidades pico (in)", columns)

    critical = {
        label: max((event.peak(label) for event in events), default=0.0)
        for label in DURATION_LABELS
    }

    for i, event in enumerate(events, start=1):
        table.add_row(
            str(i),
            Text(f"{event.start_datetime:%Y-%m-%d %H:%M}", style="date"),
            *[
                _depth_cell(
                    event.peak(label),
                    critical[label] > 0 and event.peak(label) == critical[label],
                )
                for label in DURATION_LABELS
            ],
        )

    get_console().print(table)
