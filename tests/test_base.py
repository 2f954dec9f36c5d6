import pytest

from rxwidgets.widgets.base import StreamBoundWidget


class _Incomplete(StreamBoundWidget):
    pass


def test_missing_hooks_name_the_subclass(controller):
    widget = _Incomplete(controller.stream)

    with pytest.raises(NotImplementedError, match="_Incomplete must override build"):
        widget.rebuild()
    with pytest.raises(NotImplementedError, match="_Incomplete must override _on_value"):
        widget._on_value("x")
