# configurable.py

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from .logger import Logger

StyleT = TypeVar("StyleT")

_logger = Logger(__name__)

class ViewStyleConfigurable(ABC, Generic[StyleT]):
    """
    Lets a view hold an optional style value and re-apply it on every assignment.

    Adopting classes implement ``update_style``; assigning a non-None value to
    ``view_style`` stores it and calls ``update_style`` with it before the
    assignment returns. Assigning None clears the stored value without calling
    ``update_style``.
    """

    _view_style: Optional[StyleT] = None

    @property
    def view_style(self) -> Optional[StyleT]:
        """Most recently assigned style, or None if never set."""
        return self._view_style

    @view_style.setter
    def view_style(self, style: Optional[StyleT]) -> None:
        self._view_style = style
        if style is not None:
            _logger.debug(f"Applying {type(style).__name__} to {type(self).__name__}")
            self.update_style(style)

    @abstractmethod
    def update_style(self, style: StyleT) -> None:
        """Reflect ``style`` in this view's presentation."""
