"""Context frames inherited through the element tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from svg2cetz.geometry.transform import Point, Transform
from svg2cetz.svg.style import Style

ROOT = "#root"


@dataclass(frozen=True)
class ContextFrame:
    """Scope opened by one element.

    ``anchors`` is None for scopes that never position text (root, groups)
    and a possibly empty tuple for ``text``/``tspan`` scopes.
    """

    identity: str
    transform: Transform
    anchors: tuple[Point, ...] | None = None
    style: Style | None = None


class ContextStack:
    """LIFO stack of :class:`ContextFrame` mirroring element nesting.

    The root frame is created with the caller's root transform and is never
    popped.
    """

    def __init__(self, root_transform: Transform | None = None) -> None:
        self._frames: list[ContextFrame] = [
            ContextFrame(ROOT, root_transform or Transform.identity())
        ]

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[ContextFrame]:
        """Iterate from the top of the stack toward the root."""
        return reversed(self._frames)

    @property
    def top(self) -> ContextFrame:
        return self._frames[-1]

    @property
    def root(self) -> ContextFrame:
        return self._frames[0]

    def push(self, frame: ContextFrame) -> None:
        self._frames.append(frame)

    def pop_if(self, name: str) -> bool:
        """Pop the top frame if it was opened by an element called ``name``."""
        if len(self._frames) > 1 and self._frames[-1].identity == name:
            self._frames.pop()
            return True
        return False

    def nearest(self, identities: Iterable[str]) -> tuple[int, ContextFrame] | None:
        """Find the closest frame, from the top down, with one of ``identities``.

        Returns the frame's depth index together with the frame.
        """
        wanted = frozenset(identities)
        for index in range(len(self._frames) - 1, -1, -1):
            frame = self._frames[index]
            if frame.identity in wanted:
                return index, frame
        return None

    def resolve_style(self, start: int | None = None) -> Style | None:
        """Return the first style found walking from ``start`` toward the root.

        ``start`` defaults to the top frame. None means no frame carries a
        style, which callers render as "no style annotation".
        """
        index = len(self._frames) - 1 if start is None else start
        for frame in reversed(self._frames[: index + 1]):
            if frame.style is not None:
                return frame.style
        return None

    def snapshot(self) -> tuple[ContextFrame, ...]:
        """Frames from the root up to the top."""
        return tuple(self._frames)
