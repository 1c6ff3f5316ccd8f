"""Tests para core/segmentation.py - Segmentación por IETD."""

import numpy as np
import pytest
from pydantic import ValidationError

from raincheck.config import DURATION_LABELS
from raincheck.core import build_event, segment_events
from raincheck.models import StormEvent


HOUR = 3600 * 1000
MINUTE = 60 * 1000


class TestSegmentEvents:
    """Tests para segment_events."""

    def test_splits_on_long_gap(self, two_storm_points):
        """Un hueco de 7 hr con IETD 6 hr separa dos eventos."""
        events = segment_events(two_storm_points, 6, 0)

        assert len(events) == 2
        assert events[0].total_depth == 1.0
        assert events[1].total_depth == 1.0

    def test_event_bounds(self, two_storm_points, base_time):
        """Inicio y fin corresponden al primer y último punto."""
        first, second = segment_events(two_storm_points, 6, 0)

        assert first.start_date == base_time
        assert first.end_date == base_time + HOUR
        assert second.start_date == base_time + 8 * HOUR
        assert second.end_date == base_time + 9 * HOUR
        assert first.duration_hr == pytest.approx(1.0)

    def test_below_threshold_discarded(self, make_points):
        """Un evento con lámina menor al umbral se descarta."""
        events = segment_events(make_points([0], value=0.05), 6, 0.1)

        assert events == []

    def test_threshold_equality_retained(self, make_points):
        """Lámina igual al umbral se conserva."""
        events = segment_events(make_points([0, HOUR], value=0.25), 6, 0.5)

        assert len(events) == 1
        assert events[0].total_depth == 0.5

    def test_gap_equal_to_ietd_same_event(self, make_points):
        """Un hueco exactamente igual al IETD no separa eventos."""
        events = segment_events(make_points([0, 6 * HOUR]), 6, 0)

        assert len(events) == 1
        assert events[0].total_depth == 1.0

    def test_gap_just_over_ietd_splits(self, make_points):
        """Un hueco apenas mayor al IETD separa eventos."""
        events = segment_events(make_points([0, 6 * HOUR + 1]), 6, 0)

        assert len(events) == 2
        assert [e.total_depth for e in events] == [0.5, 0.5]

    def test_fractional_ietd(self, make_points):
        """IETD fraccionario se convierte a ms."""
        points = make_points([0, 30 * MINUTE, 61 * MINUTE])

        assert len(segment_events(points, 0.5, 0)) == 2
        assert len(segment_events(points, 0.6, 0)) == 1

    def test_empty(self):
        """Sin puntos no hay eventos."""
        assert segment_events([], 6, 0) == []

    def test_single_point(self, make_points):
        """Un único punto genera un evento con su lámina."""
        events = segment_events(make_points([0], value=0.3), 6, 0)

        assert len(events) == 1
        assert events[0].total_depth == pytest.approx(0.3)
        assert events[0].start_date == events[0].end_date

    def test_all_gaps_within_ietd(self, make_points):
        """Sin huecos mayores al IETD toda la serie es un evento."""
        offsets = [i * 5 * HOUR for i in range(10)]
        events = segment_events(make_points(offsets, value=0.1), 6, 0)

        assert len(events) == 1
        assert events[0].total_depth == pytest.approx(1.0)

    def test_unsorted_input(self, two_storm_points):
        """La entrada desordenada se ordena antes de segmentar."""
        shuffled = list(reversed(two_storm_points))

        events = segment_events(shuffled, 6, 0)

        assert len(events) == 2
        assert events[0].start_date < events[1].start_date

    def test_placeholders_and_ids(self, two_storm_points):
        """Campos de período de retorno vacíos e IDs únicos."""
        events = segment_events(two_storm_points, 6, 0)

        for event in events:
            assert event.recurrence_intervals == {}
            assert event.max_return_period == "N/A"
            assert len(event.id) == 32
        assert events[0].id != events[1].id

    def test_peaks_attached(self, make_points):
        """Cada evento incluye sus intensidades pico."""
        points = make_points([0, 30 * MINUTE, 60 * MINUTE])
        (event,) = segment_events(points, 6, 0)

        assert set(event.peak_intensities) == set(DURATION_LABELS)
        assert event.peak("1hr") == 1.5
        assert event.peak("15min") == 0.5
        assert event.peak("24hr") == event.total_depth

    def test_threshold_filter_keeps_others(self, make_points):
        """Descartar un evento pequeño no afecta a los demás."""
        small = make_points([0], value=0.05)
        large = make_points([10 * HOUR, 11 * HOUR], value=0.5)

        events = segment_events(small + large, 6, 0.1)

        assert len(events) == 1
        assert events[0].start_date == 10 * HOUR

    def test_events_are_contiguous_runs(self, make_points):
        """Los eventos respetan huecos > IETD en sus bordes exteriores."""
        rng = np.random.default_rng(7)
        offsets = np.cumsum(rng.integers(1, 10 * 60, size=300)) * MINUTE
        points = make_points(offsets.tolist(), value=0.1)

        events = segment_events(points, 6, 0)

        ietd_ms = 6 * HOUR
        for previous, current in zip(events, events[1:]):
            assert current.start_date - previous.end_date > ietd_ms
        assert sum(e.total_depth for e in events) == pytest.approx(0.1 * len(points))


class TestBuildEvent:
    """Tests para build_event."""

    def test_returns_none_below_threshold(self, make_points):
        """Devuelve None si la lámina es menor al umbral."""
        assert build_event(make_points([0], value=0.01), 0.1) is None

    def test_builds_storm_event(self, make_points):
        """Construye un StormEvent inmutable."""
        event = build_event(make_points([0, HOUR]), 0)

        assert isinstance(event, StormEvent)
        assert event.total_depth == 1.0
        with pytest.raises(ValidationError):
            event.total_depth = 2.0

    def test_zero_threshold_zero_depth(self, make_points):
        """Con umbral 0 un evento de lámina 0 se conserva."""
        event = build_event(make_points([0], value=0.0), 0)

        assert event is not None
        assert event.total_depth == 0.0
