"""Signatures of the render callbacks supplied by the host application."""

from typing import Any, Callable

from PySide6.QtWidgets import QWidget

# builder(value) -> widget affichant la donnée
RxBuilder = Callable[[Any], QWidget]
# error_builder(error) -> widget affichant l'erreur
ErrorBuilder = Callable[[BaseException], QWidget]
# placeholder_builder() -> widget affiché tant qu'il n'y a rien
PlaceHolderBuilder = Callable[[], QWidget]

__all__ = ["RxBuilder", "ErrorBuilder", "PlaceHolderBuilder"]
