from typing import Any, Literal

from pydantic import Field

from height_cli.models.common import HeightModel


class TaskModel(HeightModel):
    id: str
    model: Literal["task"]
    index: int
    list_ids: list[str] = Field(alias="listIds")
    name: str
    description: str
    status: list[str]
    parent_task_id: str | None = Field(default=None, alias="parentTaskId")
    fields: list[Any]
