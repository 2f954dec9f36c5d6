import threading

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QLabel

from rxwidgets.models import VisualState
from rxwidgets.streams import StreamController
from rxwidgets.widgets import EmptyContainer, ReactiveBuilder, SpinnerBox


def _label(value):
    return QLabel(str(value))


def test_when_stream_receives_data(controller):
    builder = ReactiveBuilder(controller.stream, builder=_label)

    controller.add("Hello")

    assert isinstance(builder.current_widget, QLabel)
    assert builder.current_widget.text() == "Hello"
    assert builder.visual_state is VisualState.CONTENT


def test_data_added_before_construction_is_rendered(controller):
    controller.add("Hello")

    builder = ReactiveBuilder(controller.stream, builder=_label)

    assert builder.current_widget.text() == "Hello"


def test_no_data_and_no_placeholder_shows_progress_indicator(controller):
    builder = ReactiveBuilder(controller.stream, builder=_label)

    assert isinstance(builder.current_widget, SpinnerBox)
    assert builder.visual_state is VisualState.PLACEHOLDER
    assert not builder.has_received_event


def test_no_data_with_placeholder_builder(controller):
    builder = ReactiveBuilder(controller.stream, builder=_label,
                              placeholder_builder=lambda: QLabel("Loading"))

    assert builder.current_widget.text() == "Loading"


def test_error_without_error_builder_renders_empty_container(controller):
    builder = ReactiveBuilder(controller.stream, builder=_label)

    controller.add_error(RuntimeError("Error"))

    assert isinstance(builder.current_widget, EmptyContainer)
    assert builder.findChild(QLabel) is None
    assert builder.visual_state is VisualState.ERROR


def test_error_with_error_builder(controller):
    builder = ReactiveBuilder(controller.stream, builder=_label,
                              error_builder=lambda error: QLabel(str(error)))

    controller.add_error(RuntimeError("Custom Error"))

    assert builder.current_widget.text() == "Custom Error"
    assert str(builder.error) == "Custom Error"


def test_initial_data_rendered_before_any_event(controller):
    builder = ReactiveBuilder(controller.stream, builder=_label, initial_data="Test")

    assert builder.current_widget.text() == "Test"
    assert builder.has_data and builder.data == "Test"


def test_most_recent_event_wins(controller):
    builder = ReactiveBuilder(controller.stream, builder=_label,
                              error_builder=lambda error: QLabel(f"!{error}"))

    controller.add("one")
    controller.add_error(ValueError("two"))
    assert builder.current_widget.text() == "!two"

    controller.add("three")
    assert builder.current_widget.text() == "three"
    assert builder.error is None


def test_none_is_a_value(controller):
    builder = ReactiveBuilder(controller.stream, builder=_label)

    controller.add(None)

    assert builder.current_widget.text() == "None"


def test_rebuild_reproduces_same_output(controller):
    builder = ReactiveBuilder(controller.stream, builder=_label)
    controller.add("stable")

    builder.rebuild()

    assert builder.current_widget.text() == "stable"


def test_resubscribe_on_stream_change(qapp):
    old, new = StreamController(), StreamController()
    builder = ReactiveBuilder(old.stream, builder=_label)
    old.add("from old")

    builder.set_stream(new.stream)
    old.add("ignored")
    assert builder.current_widget.text() == "from old"

    new.add("from new")
    assert builder.current_widget.text() == "from new"


def _add_from_thread(controller, value):
    producer = threading.Thread(target=controller.add, args=(value,))
    producer.start()
    producer.join()


def test_dispose_ignores_value_queued_from_another_thread(controller):
    builder = ReactiveBuilder(controller.stream, builder=_label)

    _add_from_thread(controller, "late")
    builder.dispose()
    QCoreApplication.processEvents()

    assert not builder.has_received_event
    assert isinstance(builder.current_widget, SpinnerBox)


def test_replaced_stream_ignores_value_queued_from_another_thread(qapp):
    old, new = StreamController(), StreamController()
    builder = ReactiveBuilder(old.stream, builder=_label)

    _add_from_thread(old, "stale")
    builder.set_stream(new.stream)
    QCoreApplication.processEvents()

    assert not builder.has_received_event
    new.add("fresh")
    assert builder.current_widget.text() == "fresh"
