"""Common schema types."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class RunStatusEnum(str, Enum):
    """Automation run status enum for API."""

    STARTED = "started"
    SUCCESS = "success"
    ERROR = "error"


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)
