"""Abstract factories producing families of related doors and UI widgets."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


def _announce(message: str) -> str:
    print(message, file=sys.stderr)
    return message


class Door(ABC):
    """A door that can be opened and closed."""

    @abstractmethod
    def open(self) -> str:
        """Open the door and return what happened."""

    @abstractmethod
    def close(self) -> str:
        """Close the door and return what happened."""


class DoorHandle(ABC):
    """A handle fitted to a door."""

    @abstractmethod
    def press(self) -> str:
        """Press the handle and return what happened."""


class DoorFactory(ABC):
    """Creates a matching door and door handle."""

    @abstractmethod
    def create_door(self) -> Door:
        """Create a door."""

    @abstractmethod
    def create_door_handle(self) -> DoorHandle:
        """Create a door handle."""


class WoodenDoor(Door):
    """A wooden door."""

    def open(self) -> str:
        return _announce("Opening wooden door")

    def close(self) -> str:
        return _announce("Closing wooden door")


class WoodenDoorHandle(DoorHandle):
    """A wooden door handle."""

    def press(self) -> str:
        return _announce("Pressing wooden door handle")


class WoodenDoorFactory(DoorFactory):
    """Creates wooden doors and wooden door handles."""

    def create_door(self) -> Door:
        return WoodenDoor()

    def create_door_handle(self) -> DoorHandle:
        return WoodenDoorHandle()


class Button(ABC):
    """A renderable button."""

    @abstractmethod
    def render_button(self) -> str:
        """Return the rendering of the button."""


class TextBox(ABC):
    """A renderable text box."""

    @abstractmethod
    def render_text_box(self) -> str:
        """Return the rendering of the text box."""


class ModernButton(Button):
    """A button in the modern style."""

    def render_button(self) -> str:
        return "Rendering a modern button"


class ModernTextBox(TextBox):
    """A text box in the modern style."""

    def render_text_box(self) -> str:
        return "Rendering a modern text box"


class ClassicButton(Button):
    """A button in the classic style."""

    def render_button(self) -> str:
        return "Rendering a classic button"


class ClassicTextBox(TextBox):
    """A text box in the classic style."""

    def render_text_box(self) -> str:
        return "Rendering a classic text box"


class UIFactory(ABC):
    """Creates a matching family of UI widgets."""

    @abstractmethod
    def create_button(self) -> Button:
        """Create a button."""

    @abstractmethod
    def create_text_box(self) -> TextBox:
        """Create a text box."""


class ModernUIFactory(UIFactory):
    """Creates modern UI widgets."""

    def create_button(self) -> Button:
        return ModernButton()

    def create_text_box(self) -> TextBox:
        return ModernTextBox()


class ClassicUIFactory(UIFactory):
    """Creates classic UI widgets."""

    def create_button(self) -> Button:
        return ClassicButton()

    def create_text_box(self) -> TextBox:
        return ClassicTextBox()