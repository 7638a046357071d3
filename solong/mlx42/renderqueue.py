"""Draw calls and depth ordering of the render queue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

__all__ = ["DrawCall", "sort_render_queue"]


@dataclass
class DrawCall:
    """One instance of an image waiting to be drawn."""

    image: Any
    instance_id: int

    @property
    def z(self) -> int:
        """Current depth of the instance this call draws."""
        return self.image.instances[self.instance_id].z


def sort_render_queue(queue: Iterable[DrawCall]) -> list[DrawCall]:
    """Return the draw calls ordered by ascending depth.

    Each call is inserted in front of those of equal depth, so calls that
    share a depth come out in the reverse of their queued order.
    """
    return sorted(reversed(list(queue)), key=lambda call: call.z)