import pytest

from wideriver.enums import (
    Layout,
    LogThreshold,
    Stack,
    layout_name,
    layout_val,
    log_threshold_name,
    log_threshold_val,
    stack_name,
    stack_val,
)


@pytest.mark.parametrize(
    "layout, name",
    [
        (Layout.MONOCLE, "monocle"),
        (Layout.LEFT, "left"),
        (Layout.RIGHT, "right"),
        (Layout.TOP, "top"),
        (Layout.BOTTOM, "bottom"),
        (Layout.WIDE, "wide"),
    ],
)
def test_layout_names(layout, name):
    assert layout_name(layout) == name
    assert layout_val(name) is layout


@pytest.mark.parametrize(
    "stack, name",
    [(Stack.EVEN, "even"), (Stack.DIMINISH, "diminish"), (Stack.DWINDLE, "dwindle")],
)
def test_stack_names(stack, name):
    assert stack_name(stack) == name
    assert stack_val(name) is stack


@pytest.mark.parametrize("threshold", list(LogThreshold))
def test_log_threshold_round_trip(threshold):
    assert log_threshold_val(log_threshold_name(threshold)) is threshold


def test_lookup_is_case_insensitive():
    assert layout_val("WiDe") is Layout.WIDE
    assert stack_val("DWINDLE") is Stack.DWINDLE
    assert log_threshold_val("Debug") is LogThreshold.DEBUG


def test_unknown_names():
    assert layout_val("spiral") is None
    assert stack_val("") is None
    assert log_threshold_val(None) is None
    assert layout_name(0) is None
    assert stack_name(99) is None


def test_threshold_ordering():
    ordered = sorted(LogThreshold)
    assert [log_threshold_name(t) for t in ordered] == [
        "debug",
        "info",
        "warning",
        "error",
        "fatal",
    ]