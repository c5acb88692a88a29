from enum import Enum
from typing import ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field, JsonValue

TaskOutputRecord = dict[str, JsonValue]


class BaseJobParams(BaseModel):
    input_path: str = Field(description="path to the input file, relative to the job storage")


class TaskOutput(BaseModel):
    pass


P = TypeVar("P", bound=BaseJobParams)
Q = TypeVar("Q", bound=TaskOutput)


class JobStatus(str, Enum):
    completed = "completed"
    error = "error"


class JobRecordUpdate(BaseModel):
    status: JobStatus | None = None
    progress: int | None = Field(default=None, ge=0, le=100)
    output: TaskOutputRecord | None = None
    error_message: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
