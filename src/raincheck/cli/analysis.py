"""
Comandos CLI para ingesta de archivos y análisis de eventos.
"""

import warnings
from pathlib import Path
from typing import Annotated, Optional

import typer

from raincheck.cli.theme import (
    format_depth,
    print_error,
    print_events_table,
    print_field,
    print_header,
    print_info,
    print_peaks_table,
    print_separator,
    print_success,
    print_warning,
)
from raincheck.cli.validators import (
    validate_ietd, validate_input_files, validate_threshold,
)
from raincheck.config import (
    DEFAULT_IETD_HOURS,
    DEFAULT_MIN_RAINFALL_THRESHOLD,
    AnalysisSettings,
    ExportFormat,
)
from raincheck.export import events_to_csv, events_to_json, points_to_csv
from raincheck.ingest import detect_dialect, normalize_extension, parse_rain_text
from raincheck.session import RainfallSession


FilesArg = Annotated[list[Path], typer.Argument(help="Archivos de lluvia (.csv, .dat, .tsf)")]
IetdOpt = Annotated[float, typer.Option("--ietd", "-i", help="Período seco entre eventos (hr)")]
ThresholdOpt = Annotated[float, typer.Option("--threshold", "-t", help="Lámina mínima de evento (in)")]


def _load_session(files: list[Path], ietd: float, threshold: float) -> RainfallSession:
    """Valida entradas e ingiere los archivos en orden."""
    validate_ietd(ietd)
    validate_threshold(threshold)
    validate_input_files(files)

    session = RainfallSession(
        AnalysisSettings(ietd_hours=ietd, min_rainfall_threshold=threshold)
    )

    for path in files:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", UserWarning)
            count = session.add_file(path)
        for warning in caught:
            print_warning(str(warning.message))
        if count:
            print_info(f"{path.name}: {count} mediciones")

    return session


def events(
    files: FilesArg,
    ietd: IetdOpt = DEFAULT_IETD_HOURS,
    threshold: ThresholdOpt = DEFAULT_MIN_RAINFALL_THRESHOLD,
    output: Annotated[Optional[str], typer.Option("--output", "-o", help="Archivo de salida")] = None,
    fmt: Annotated[ExportFormat, typer.Option("--format", "-f", help="Formato: csv, json")] = ExportFormat.CSV,
):
    """
    Identifica eventos de tormenta en uno o más archivos.

    Ejemplo:
        raincheck events gauge.csv
        raincheck events enero.dat febrero.dat --ietd 12 -t 0.25
        raincheck events gauge.tsf -o eventos.json -f json
    """
    session = _load_session(files, ietd, threshold)
    summary = session.summary()

    print_header("EVENTOS DE TORMENTA", f"IETD {ietd:g} hr - umbral {threshold:g} in")
    print_field("Mediciones", summary.point_count)
    print_field("Lluvia total", format_depth(summary.total_rainfall), "in")
    print_field("Eventos", summary.event_count)
    print_field("Mayor evento", format_depth(summary.largest_event_depth), "in")
    print_field("Pico 1hr max", format_depth(summary.max_peak_1hr), "in")
    print_field("Max periodo retorno", summary.max_return_period)
    print_separator()

    if session.events:
        print_events_table(session.events)
    else:
        print_warning("No se identificaron eventos. Revise los datos o la configuración.")

    if output:
        if fmt == ExportFormat.JSON:
            events_to_json(session.events, output)
        else:
            events_to_csv(session.events, output)
        print_success(f"Eventos exportados a: {output}")


def peaks(
    files: FilesArg,
    ietd: IetdOpt = DEFAULT_IETD_HOURS,
    threshold: ThresholdOpt = DEFAULT_MIN_RAINFALL_THRESHOLD,
):
    """
    Muestra las intensidades pico (15min a 24hr) de cada evento.

    Ejemplo:
        raincheck peaks gauge.csv --ietd 6
    """
    session = _load_session(files, ietd, threshold)

    if not session.events:
        print_warning("No se identificaron eventos.")
        return

    print_peaks_table(session.events)


def parse(
    file: Annotated[Path, typer.Argument(help="Archivo de lluvia")],
    ext: Annotated[Optional[str], typer.Option("--ext", help="Forzar extensión (csv, dat, tsf)")] = None,
    output: Annotated[Optional[str], typer.Option("--output", "-o", help="Exportar puntos a CSV")] = None,
):
    """
    Lee un archivo y muestra el formato detectado y las mediciones.

    Ejemplo:
        raincheck parse gauge.dat
        raincheck parse export.txt --ext tsf -o puntos.csv
    """
    validate_input_files([file])

    text = file.read_text(encoding="utf-8-sig", errors="replace")
    extension = normalize_extension(ext or file.suffix, file.name)
    points = parse_rain_text(text, file.name, extension)

    print_header("LECTURA DE ARCHIVO", file.name)
    print_field("Formato", detect_dialect(text, extension).value)
    print_field("Mediciones", len(points))

    if not points:
        print_error("No se encontraron mediciones válidas")
        raise typer.Exit(1)

    first, last = points[0], points[-1]
    print_field("Primera", f"{first.as_datetime:%Y-%m-%d %H:%M} = {first.value:g}", "in")
    print_field("Ultima", f"{last.as_datetime:%Y-%m-%d %H:%M} = {last.value:g}", "in")
    print_field("Lluvia total", format_depth(sum(p.value for p in points)), "in")

    if output:
        points_to_csv(points, output)
        print_success(f"Mediciones exportadas a: {output}")
