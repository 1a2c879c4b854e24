"""Closest-corners collision detection for drop targets."""
from dataclasses import dataclass
from math import hypot
from typing import List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    @property
    def corners(self) -> List[Tuple[float, float]]:
        right = self.left + self.width
        bottom = self.top + self.height
        return [
            (self.left, self.top),
            (right, self.top),
            (self.left, bottom),
            (right, bottom),
        ]


def corner_distance(active: Rect, target: Rect) -> float:
    """Mean distance between matching corners of two rectangles."""
    pairs = zip(active.corners, target.corners)
    return sum(hypot(ax - tx, ay - ty) for (ax, ay), (tx, ty) in pairs) / 4


def closest_corners(active: Rect, droppables: Mapping[str, Rect]) -> Optional[str]:
    """Id of the droppable region whose corners sit closest to the dragged rect.

    Columns and cards are both droppables. Ties go to the region listed first.
    """
    best_id = None
    best_distance = None
    for droppable_id, rect in droppables.items():
        distance = corner_distance(active, rect)
        if best_distance is None or distance < best_distance:
            best_id, best_distance = droppable_id, distance
    return best_id
