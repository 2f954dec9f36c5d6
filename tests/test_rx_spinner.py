from PySide6.QtWidgets import QPushButton

from rxwidgets.config import TargetPlatform
from rxwidgets.widgets import ActivityIndicator, CircularProgressIndicator, EmptyContainer, RxSpinner


def test_normal_widget_until_busy(controller):
    button = QPushButton("Run")
    spinner = RxSpinner(controller.stream, normal=button, platform=TargetPlatform.ANDROID)

    assert spinner.current_widget is button
    assert not spinner.is_busy

    controller.add(True)
    assert spinner.is_busy
    assert spinner.current_widget is spinner.spinner_box

    controller.add(False)
    assert spinner.current_widget is button


def test_empty_container_when_no_normal_widget(controller):
    spinner = RxSpinner(controller.stream, platform=TargetPlatform.LINUX)
    assert isinstance(spinner.current_widget, EmptyContainer)


def test_spinner_box_is_square_of_twice_the_radius(controller):
    spinner = RxSpinner(controller.stream, radius=15, platform=TargetPlatform.ANDROID)

    assert spinner.spinner.width() == 30
    assert spinner.spinner.height() == 30


def test_platform_selects_visual(controller):
    material = RxSpinner(controller.stream, platform=TargetPlatform.ANDROID)
    cupertino = RxSpinner(controller.stream, platform=TargetPlatform.IOS)

    assert isinstance(material.spinner, CircularProgressIndicator)
    assert isinstance(cupertino.spinner, ActivityIndicator)


def test_cosmetic_parameters_reach_spinner(controller):
    spinner = RxSpinner(controller.stream, platform=TargetPlatform.ANDROID, stroke_width=2.0,
                        value=0.25, value_color="#ff0000", spinner_name="busySpinner")

    indicator = spinner.spinner
    assert indicator.config.stroke_width == 2.0
    assert indicator.value == 0.25
    assert not indicator.animated
    assert indicator.objectName() == "busySpinner"
