"""Structured layout trees.

A layout tree mixes :class:`SideBySide`, :class:`VerticalStack`,
:class:`Sized`, :class:`View` and :class:`ViewName` nodes. The nodes are
frozen value objects and are validated at construction time, so an
invalid tree can never be built. See
https://flexivis.infrastruktur.link/#layout for how they combine.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from flexivis_url.domain.types import ViewType

MAX_PERCENTAGE = 255


class _LayoutPart:
    """Behaviour shared by every layout node."""

    __slots__ = ()

    def occupying_percentage(self, percentage: int) -> Sized:
        """Wrap this node so it takes *percentage* of the available space."""
        return Sized(self, percentage)  # type: ignore[arg-type]


def _check_children(kind: str, children: Iterable[object]) -> tuple[LayoutNode, ...]:
    nodes = tuple(children)
    if not nodes:
        msg = f"{kind} needs at least 1 structured layout but got 0"
        raise ValueError(msg)
    for child in nodes:
        if not isinstance(child, _LayoutPart):
            msg = f"{kind} children must be layout nodes, got {type(child).__name__}"
            raise TypeError(msg)
    return nodes  # type: ignore[return-value]


@dataclass(frozen=True)
class ViewName(_LayoutPart):
    """A bare reference to a view by name (a single name is a valid layout)."""

    name: str


@dataclass(frozen=True)
class View(_LayoutPart):
    """A named view of a resource.

    ``type`` is a simplified model of the prefix structure documented at
    https://flexivis.infrastruktur.link/#view-specifications. The name is
    used both as a layout atom and as the URL parameter key; keeping names
    unique within one tree is up to the caller.
    """

    name: str
    type: ViewType
    resource: str

    def __post_init__(self) -> None:
        if not self.name:
            msg = "View name must not be empty"
            raise ValueError(msg)


@dataclass(frozen=True, init=False)
class SideBySide(_LayoutPart):
    """Sublayouts joined by ``/`` and rendered side by side."""

    children: tuple[LayoutNode, ...]

    def __init__(self, *children: LayoutNode) -> None:
        object.__setattr__(self, "children", _check_children("SideBySide", children))


@dataclass(frozen=True, init=False)
class VerticalStack(_LayoutPart):
    """Sublayouts joined by ``-`` and rendered one on top of another."""

    children: tuple[LayoutNode, ...]

    def __init__(self, *children: LayoutNode) -> None:
        object.__setattr__(self, "children", _check_children("VerticalStack", children))


@dataclass(frozen=True)
class Sized(_LayoutPart):
    """How much of the available vertical or horizontal space a sublayout uses.

    Meant to be used as a child of :class:`SideBySide` or
    :class:`VerticalStack`.
    """

    inner: LayoutNode
    percentage: int

    def __post_init__(self) -> None:
        if not isinstance(self.inner, _LayoutPart):
            msg = f"Sized needs a layout node, got {type(self.inner).__name__}"
            raise TypeError(msg)
        if isinstance(self.percentage, bool) or not isinstance(self.percentage, int):
            msg = f"Percentage must be an int, got {self.percentage!r}"
            raise TypeError(msg)
        if not 0 <= self.percentage <= MAX_PERCENTAGE:
            msg = f"Percentage must be between 0 and {MAX_PERCENTAGE}, got {self.percentage}"
            raise ValueError(msg)


LayoutNode: TypeAlias = ViewName | View | SideBySide | VerticalStack | Sized
