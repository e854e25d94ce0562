from pydantic import BaseModel, ConfigDict


class HeightModel(BaseModel):
    """Base for Height API records: immutable, camelCase on the wire, unknown keys kept."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class Unimplemented(BaseModel):
    """Result of an operation whose contract is documented but not built yet."""

    operation: str
    resource_path: str
    message: str
