from .task import PRIORITY_RANK, Task, TaskPriority, UTCTimestamp, utcnow

__all__ = ["Task", "TaskPriority", "PRIORITY_RANK", "UTCTimestamp", "utcnow"]
