from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel

from rxwidgets.widgets import EmptyContainer, RxText


def test_rx_text_when_have_data(controller):
    text = RxText(controller.stream)

    controller.add("Text")

    assert text.text == "Text"


def test_rx_text_when_have_initial_data(controller):
    text = RxText(controller.stream, initial_data="WelloWorld")

    assert text.text == "WelloWorld"


def test_rx_text_error_with_error_builder(controller):
    error_label = QLabel()
    error_label.setObjectName("ErrorKey")

    def error_builder(error):
        error_label.setText(str(error))
        return error_label

    text = RxText(controller.stream, error_builder=error_builder)
    controller.add_error(RuntimeError("Error"))

    assert text.findChild(QLabel, "ErrorKey") is error_label
    assert error_label.text() == "Error"


def test_rx_text_error_without_error_builder(controller):
    text = RxText(controller.stream)

    controller.add_error(RuntimeError("Error"))

    assert isinstance(text.current_widget, EmptyContainer)
    assert text.text is None


def test_rx_text_empty_stream_without_placeholder(controller):
    text = RxText(controller.stream)

    assert isinstance(text.current_widget, EmptyContainer)


def test_rx_text_empty_stream_with_placeholder(controller):
    text = RxText(controller.stream, placeholder_builder=lambda: QLabel("Test"))

    assert text.text == "Test"


def test_rx_text_applies_label_options(controller):
    text = RxText(controller.stream, style_sheet="color: #4db8ff;", alignment=Qt.AlignCenter)

    controller.add(3.5)

    label = text.current_widget
    assert label.text() == "3.5"
    assert label.styleSheet() == "color: #4db8ff;"
    assert label.alignment() == Qt.AlignCenter
