class TaskNotFoundError(Exception):
    """Raised when a task does not exist or is not owned by the requester.

    Both cases deliberately share this one error.
    """

    def __init__(self, task_id: str):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id
