"""Unit tests for teamops.priority.tables - lookup and display tables."""

import pytest

from teamops.priority import (
    COMPLEXITY_LABELS,
    DURABILITY_LABELS,
    DURATION_HOURS,
    DURATION_LABELS,
    DURATION_SCORES,
    IMPORTANCE_LABELS,
    QUADRANT_LABELS,
    URGENCY_LABELS,
    Quadrant,
)

LEVELS = range(1, 6)


class TestLabels:
    def test_every_duration_code_has_a_label(self):
        assert set(DURATION_LABELS) == set(DURATION_SCORES) == set(DURATION_HOURS)

    def test_durability_categories(self):
        assert set(DURABILITY_LABELS) == {"SHORT", "MEDIUM", "LONG"}

    @pytest.mark.parametrize("labels", [URGENCY_LABELS, IMPORTANCE_LABELS, COMPLEXITY_LABELS])
    def test_every_level_has_a_label(self, labels):
        assert set(labels) == set(LEVELS)
        assert all(labels[level] for level in LEVELS)

    def test_every_quadrant_has_a_label(self):
        assert set(QUADRANT_LABELS) == {q.value for q in Quadrant}
        for quadrant in Quadrant:
            entry = QUADRANT_LABELS[quadrant.value]
            assert entry["label"]
            assert entry["description"]
            assert entry["color"]

    def test_quadrant_display(self):
        assert QUADRANT_LABELS[Quadrant.DO_NOW.value]["label"] == "Do now"
        assert QUADRANT_LABELS[Quadrant.ELIMINATE.value]["color"] == "gray"


class TestReadOnly:
    @pytest.mark.parametrize("table", [
        DURATION_HOURS,
        DURATION_SCORES,
        DURATION_LABELS,
        DURABILITY_LABELS,
        URGENCY_LABELS,
        IMPORTANCE_LABELS,
        COMPLEXITY_LABELS,
        QUADRANT_LABELS,
    ])
    def test_assignment_rejected(self, table):
        with pytest.raises(TypeError):
            table["NEW"] = "value"

    def test_nested_quadrant_entries_read_only(self):
        with pytest.raises(TypeError):
            QUADRANT_LABELS["DO_NOW"]["color"] = "green"
