"""Tests for domain enums."""

import pytest

from app.domain.value_objects.enums import GlobeState, InputKind, OfficeType


def test_office_type_values():
    assert OfficeType.PRIMARY.value == "Primary"
    assert OfficeType.SECONDARY.value == "Secondary"


@pytest.mark.parametrize("raw", ["Primary", "primary", " PRIMARY "])
def test_office_type_parse_case_insensitive(raw):
    assert OfficeType.parse(raw) is OfficeType.PRIMARY


def test_office_type_parse_unknown():
    with pytest.raises(ValueError, match="Unknown office type"):
        OfficeType.parse("Tertiary")


def test_globe_states_count():
    assert len(GlobeState) == 4


def test_gesture_start_kinds():
    starts = {k for k in InputKind if k.begins_gesture()}
    assert starts == {
        InputKind.POINTER_DOWN,
        InputKind.DRAG_START,
        InputKind.WHEEL,
        InputKind.PINCH,
        InputKind.ZOOM_START,
    }


def test_gesture_end_kinds():
    for kind in (InputKind.POINTER_UP, InputKind.TOUCH_END, InputKind.ZOOM_END):
        assert kind.begins_gesture() is False
