#!/usr/bin/env python3
"""
Base class for class-based rendering units.

Function units are plain callables ``unit(**props) -> output``. Class units
subclass Component; a binding creates one instance at mount and keeps it
for the binding's lifetime.

Required Methods:
    - render(): Produce output from self.props

Optional Methods:
    - did_mount(): Called once after the first render
    - will_receive_props(next_props): Called before props are replaced
    - will_unmount(): Called when the binding closes
"""

from abc import ABC, abstractmethod
from typing import Any

__all__ = ["Component"]


class Component(ABC):
    """Abstract base class for stateful rendering units."""

    display_name: str | None = None

    def __init__(self, **props):
        """Initialize component.

        Args:
            **props: Initial props
        """
        self.props: dict[str, Any] = props

    @abstractmethod
    def render(self) -> Any:
        """Render output from the current props."""
        pass

    def did_mount(self):  # noqa: B027
        """Hook called once after the first render."""
        pass

    def will_receive_props(self, next_props: dict[str, Any]):  # noqa: B027
        """Hook called with the next props before a re-render.

        Args:
            next_props: Props about to replace self.props
        """
        pass

    def will_unmount(self):  # noqa: B027
        """Hook called when the owning binding closes."""
        pass
