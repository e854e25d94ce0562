from height_cli.context import AppContext
from height_cli.models.common import Unimplemented
from height_cli.models.tasks import TaskModel


def task_path(task_id: str) -> str:
    return f"tasks/{task_id}"


def get_task(ctx: AppContext, task_id: str) -> TaskModel | Unimplemented:
    """Fetch a single task.

    Intended contract: GET tasks/<id> returning a TaskModel. Not built yet, so
    no request is made and an Unimplemented result is returned instead.
    """
    return Unimplemented(
        operation="task",
        resource_path=task_path(task_id),
        message=f"Fetching a single task is not implemented yet (task id: {task_id})",
    )
