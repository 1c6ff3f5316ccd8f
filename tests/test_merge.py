"""Tests para core/merge.py - Unión de lotes sin duplicados."""

from raincheck.core import merge_points
from raincheck.models import RainPoint


def _p(timestamp, value, source="1"):
    return RainPoint(timestamp=timestamp, value=value, source_id=source)


class TestMergePoints:
    """Tests para merge_points."""

    def test_existing_wins_on_collision(self):
        """Ante timestamps repetidos se conserva el punto existente."""
        existing = [_p(100, 1), _p(200, 2)]
        incoming = [_p(200, 2, "2"), _p(300, 3, "2")]

        merged = merge_points(existing, incoming)

        assert len(merged) == 3
        assert [p.timestamp for p in merged] == [100, 200, 300]
        assert merged[1].value == 2
        assert merged[1].source_id == "1"

    def test_existing_wins_with_different_value(self):
        """El valor entrante no reemplaza al existente."""
        merged = merge_points([_p(100, 1.0)], [_p(100, 9.0, "2")])

        assert len(merged) == 1
        assert merged[0].value == 1.0

    def test_result_sorted(self):
        """El resultado queda ordenado por timestamp."""
        merged = merge_points([_p(500, 1)], [_p(300, 1), _p(100, 1), _p(400, 1)])

        assert [p.timestamp for p in merged] == [100, 300, 400, 500]

    def test_incoming_duplicates_first_wins(self):
        """Dentro del lote entrante gana el primero visto."""
        merged = merge_points([], [_p(100, 1.0, "a"), _p(100, 2.0, "b")])

        assert len(merged) == 1
        assert merged[0].source_id == "a"

    def test_existing_duplicates_last_wins(self):
        """Duplicados dentro de la serie existente: el último sobrescribe."""
        merged = merge_points([_p(100, 1.0, "a"), _p(100, 2.0, "b")], [])

        assert len(merged) == 1
        assert merged[0].source_id == "b"

    def test_empty_inputs(self):
        """Entradas vacías producen salida vacía o identidad."""
        assert merge_points([], []) == []

        existing = [_p(100, 1), _p(200, 2)]
        assert merge_points(existing, []) == existing
        assert merge_points([], existing) == existing

    def test_inputs_not_mutated(self):
        """Las listas de entrada no se modifican."""
        existing = [_p(200, 2)]
        incoming = [_p(100, 1)]

        merge_points(existing, incoming)

        assert existing == [_p(200, 2)]
        assert incoming == [_p(100, 1)]

    def test_idempotent(self):
        """Reaplicar el mismo lote no cambia nada."""
        a = [_p(100, 1), _p(300, 3)]
        b = [_p(300, 7, "2"), _p(400, 4, "2"), _p(50, 0.5, "2")]

        once = merge_points(a, b)
        twice = merge_points(once, b)

        assert twice == once
