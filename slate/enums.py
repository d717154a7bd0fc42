"""Orientation and position enumerations and their conversions."""

from __future__ import annotations

import enum
import string

__all__ = [
    "Orientation",
    "PositionType",
    "ToolkitOrientation",
    "ToolkitPosition",
    "orientation_to_toolkit",
    "position_type_to_toolkit",
    "orientation_to_string",
    "position_type_to_string",
    "parse_orientation",
    "parse_position_type",
]

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_fold(value: str) -> str:
    """Lower-case ASCII letters only, leaving other characters untouched."""
    return value.translate(_ASCII_LOWER)


class Orientation(enum.IntEnum):
    """Orientation options for UI elements."""

    HORIZONTAL = 0
    VERTICAL = 1

    @property
    def nick(self) -> str:
        return self.name.lower()


class PositionType(enum.IntEnum):
    """Position options for UI elements."""

    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3

    @property
    def nick(self) -> str:
        return self.name.lower()


class ToolkitOrientation(enum.IntEnum):
    """Orientation as understood by the underlying widget toolkit."""

    HORIZONTAL = 0
    VERTICAL = 1


class ToolkitPosition(enum.IntEnum):
    """Position as understood by the underlying widget toolkit."""

    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3


_ORIENTATION_TO_TOOLKIT = {
    Orientation.HORIZONTAL: ToolkitOrientation.HORIZONTAL,
    Orientation.VERTICAL: ToolkitOrientation.VERTICAL,
}

_POSITION_TO_TOOLKIT = {
    PositionType.LEFT: ToolkitPosition.LEFT,
    PositionType.RIGHT: ToolkitPosition.RIGHT,
    PositionType.TOP: ToolkitPosition.TOP,
    PositionType.BOTTOM: ToolkitPosition.BOTTOM,
}

_ORIENTATION_BY_NICK = {member.nick: member for member in Orientation}
_POSITION_BY_NICK = {member.nick: member for member in PositionType}


def orientation_to_toolkit(orientation: Orientation | int) -> ToolkitOrientation:
    """Convert an Orientation to the toolkit's orientation.

    Raises ValueError for a value that is not an Orientation.
    """
    return _ORIENTATION_TO_TOOLKIT[Orientation(orientation)]


def position_type_to_toolkit(position: PositionType | int) -> ToolkitPosition:
    """Convert a PositionType to the toolkit's position.

    Raises ValueError for a value that is not a PositionType.
    """
    return _POSITION_TO_TOOLKIT[PositionType(position)]


def orientation_to_string(orientation: Orientation | int) -> str:
    """Return the lower-case name of an orientation."""
    return Orientation(orientation).nick


def position_type_to_string(position: PositionType | int) -> str:
    """Return the lower-case name of a position."""
    return PositionType(position).nick


def parse_orientation(value: str | None) -> Orientation:
    """Parse an orientation name, ignoring ASCII case.

    None and unknown names give Orientation.HORIZONTAL.
    """
    if value is None:
        return Orientation.HORIZONTAL
    return _ORIENTATION_BY_NICK.get(_ascii_fold(value), Orientation.HORIZONTAL)


def parse_position_type(value: str | None) -> PositionType:
    """Parse a position name, ignoring ASCII case.

    None and unknown names give PositionType.LEFT.
    """
    if value is None:
        return PositionType.LEFT
    return _POSITION_BY_NICK.get(_ascii_fold(value), PositionType.LEFT)