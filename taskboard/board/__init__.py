from .collision import Rect, closest_corners
from .columns import PRIORITY_COLUMNS, build_board, group_by_priority
from .drag import BoardError, DragController, DragState, InvalidDragTransition, UnknownTaskError

__all__ = [
    "BoardError",
    "PRIORITY_COLUMNS",
    "DragController",
    "DragState",
    "InvalidDragTransition",
    "UnknownTaskError",
    "Rect",
    "build_board",
    "closest_corners",
    "group_by_priority",
]
