from __future__ import annotations

import pytest

from app.game.labels import LabelSet


def test_default_label_set_is_a_to_d() -> None:
    assert LabelSet.of_size().labels == ("A", "B", "C", "D")


def test_label_set_is_sized_at_construction() -> None:
    labels = LabelSet.of_size(6)

    assert list(labels) == ["A", "B", "C", "D", "E", "F"]
    assert len(labels) == 6
    assert "F" in labels
    assert "G" not in labels


@pytest.mark.parametrize("size", [0, -1, 27])
def test_label_set_rejects_out_of_range_sizes(size: int) -> None:
    with pytest.raises(ValueError):
        LabelSet.of_size(size)


def test_label_set_normalizes_user_input() -> None:
    labels = LabelSet.of_size(3)

    assert labels.normalize(" b ") == "B"
    assert labels.normalize("d") is None


def test_label_set_builds_empty_draft_mappings() -> None:
    labels = LabelSet.of_size(2)

    assert labels.empty_answers() == {"A": "", "B": ""}
    assert labels.empty_flags() == {"A": False, "B": False}
