from rxwidgets.config import SpinnerConfig, TargetPlatform
from rxwidgets.widgets import ActivityIndicator, CircularProgressIndicator, SpinnerBox, build_spinner


def test_build_spinner_centres_square_box(qapp):
    box = build_spinner(SpinnerConfig(radius=10, platform=TargetPlatform.ANDROID), object_name="spin")

    assert isinstance(box, SpinnerBox)
    assert isinstance(box.spinner, CircularProgressIndicator)
    assert box.spinner.size().width() == box.spinner.size().height() == 20
    assert box.spinner.objectName() == "spin"


def test_indeterminate_spinner_advances(qapp):
    box = build_spinner(SpinnerConfig(platform=TargetPlatform.IOS))
    spinner = box.spinner

    assert isinstance(spinner, ActivityIndicator)
    assert spinner.animated
    before = spinner.angle
    spinner._advance()
    assert spinner.angle == (before + spinner.STEP_DEGREES) % 360


def test_spinners_paint_without_errors(qapp):
    configs = [
        SpinnerConfig(platform=TargetPlatform.ANDROID, background_color="#333333", value_color="#4db8ff"),
        SpinnerConfig(platform=TargetPlatform.ANDROID, value=0.5),
        SpinnerConfig(platform=TargetPlatform.MACOS, value_color="white"),
    ]
    for config in configs:
        box = build_spinner(config)
        pixmap = box.spinner.grab()
        assert not pixmap.isNull()
