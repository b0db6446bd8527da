"""Focus handling for rendered segments.

The annotation engine only marks segments as focused. Bringing the focused
segment into view belongs to whatever surface renders the segments, which
plugs in through the ``ScrollSurface`` protocol.
"""

from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel

from ..schemas.critique import Segment


class Viewport(BaseModel):
    element_top: float
    element_height: float
    scroll_top: float
    container_height: float


class ScrollSurface(Protocol):
    def measure(self, position: int) -> Viewport: ...

    def scroll_to(self, top: float) -> None: ...


def toggle_focus(current_id: str | None, clicked_id: str) -> str | None:
    """Clicking the focused highlight again clears focus."""
    return None if current_id == clicked_id else clicked_id


def locate_first(segments: Sequence[Segment], focused_id: str | None) -> int | None:
    if focused_id is None:
        return None
    for position, segment in enumerate(segments):
        if segment.annotation is not None and segment.annotation.id == focused_id:
            return position
    return None


def centered_scroll_top(viewport: Viewport) -> float | None:
    """Scroll offset that centers the element, or None when it is fully visible."""
    top = viewport.element_top
    bottom = top + viewport.element_height
    if top >= viewport.scroll_top and bottom <= viewport.scroll_top + viewport.container_height:
        return None
    return top - viewport.container_height / 2 + viewport.element_height / 2


def ensure_visible(surface: ScrollSurface, position: int) -> bool:
    target = centered_scroll_top(surface.measure(position))
    if target is None:
        return False
    surface.scroll_to(target)
    return True


def focus_segment(
    surface: ScrollSurface, segments: Sequence[Segment], focused_id: str | None
) -> int | None:
    position = locate_first(segments, focused_id)
    if position is not None:
        ensure_visible(surface, position)
    return position
