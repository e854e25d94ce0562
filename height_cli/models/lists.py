from typing import Literal

from pydantic import BaseModel

from height_cli.models.common import HeightModel


class ListModel(HeightModel):
    id: str
    model: Literal["list"]
    type: Literal["list", "smartlist", "user", "inbox", "search"]
    key: str
    description: str
    url: str
    hue: int | float | None = None
    visualization: Literal["list", "kanban", "calendar", "gannt"]


class ListQueryOptions(BaseModel):
    query: str | None = None
    search_param: str | None = None  # name of the query parameter carrying `query`
