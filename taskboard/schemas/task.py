"""Request/response schemas for the task list."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class TaskCreateRequest(BaseModel):
    task: str | None = Field(default=None, description="Task text")


class TaskRead(BaseModel):
    """One task as returned by GET /tasks, keyed by the tasks table's column names."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int = Field(validation_alias=AliasChoices("owner_id", "user_id"))
    task: str = Field(validation_alias=AliasChoices("text", "task"))
