import pytest
from PySide6.QtWidgets import QLabel

from rxwidgets.streams import StreamController
from rxwidgets.widgets import WidgetSelector


@pytest.fixture
def fragments(qapp):
    return QLabel("busy"), QLabel("idle")


def test_on_false_before_any_event(controller, fragments):
    on_true, on_false = fragments
    selector = WidgetSelector(controller.stream, on_true, on_false)

    assert selector.current_widget is on_false
    assert selector.flag is False


@pytest.mark.parametrize("events, expected_true", [
    ([True], True),
    ([False], False),
    ([True, False], False),
    ([False, True], True),
    ([True, True, False, True], True),
])
def test_latest_flag_selects_fragment(controller, fragments, events, expected_true):
    on_true, on_false = fragments
    selector = WidgetSelector(controller.stream, on_true, on_false)

    for flag in events:
        controller.add(flag)

    assert selector.current_widget is (on_true if expected_true else on_false)


def test_fragments_are_switched_not_rebuilt(controller, fragments):
    on_true, on_false = fragments
    selector = WidgetSelector(controller.stream, on_true, on_false)

    controller.add(True)
    controller.add(False)
    controller.add(True)

    assert selector.current_widget is on_true
    assert on_false.parent() is selector


def test_error_on_flag_stream_keeps_state(controller, fragments):
    on_true, on_false = fragments
    selector = WidgetSelector(controller.stream, on_true, on_false)

    controller.add(True)
    controller.add_error(RuntimeError("flag source broke"))

    assert selector.current_widget is on_true


def test_dispose_cancels_subscription(controller, fragments):
    on_true, on_false = fragments
    selector = WidgetSelector(controller.stream, on_true, on_false)
    selector.dispose()

    controller.add(True)

    assert selector.current_widget is on_false
    assert not controller.has_listeners


def test_replacing_stream_ignores_old_one(qapp, fragments):
    on_true, on_false = fragments
    old, new = StreamController(), StreamController()
    selector = WidgetSelector(old.stream, on_true, on_false)

    selector.set_stream(new.stream)
    old.add(True)
    assert selector.current_widget is on_false

    new.add(True)
    assert selector.current_widget is on_true
