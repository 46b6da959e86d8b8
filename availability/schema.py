from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

# Zero-padded 24-hour clock. String ordering of values matching this pattern
# is the same as chronological ordering, which validate_window relies on.
TIME_OF_DAY_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d:[0-5]\d$"


class AvailabilityWindow(BaseModel):
    from_weekday: int = Field(ge=0, le=6, description="0=Sun .. 6=Sat")
    to_weekday: int = Field(ge=0, le=6, description="0=Sun .. 6=Sat")
    from_time: str = Field(pattern=TIME_OF_DAY_PATTERN, description="HH:MM:SS")
    to_time: str = Field(pattern=TIME_OF_DAY_PATTERN, description="HH:MM:SS")

    model_config = ConfigDict(frozen=True)


class FieldError(BaseModel):
    field: str
    message: str

    model_config = ConfigDict(frozen=True)
