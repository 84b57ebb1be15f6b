from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from pydantic import BaseModel, Field, field_validator


class PeriodSettings(BaseModel):
    normal_date_format: str = Field(default="%Y-%m-%d %H:%M", min_length=1)
    timezone: str = "UTC"
    datetime_picker_format: str = "YYYY-MM-DD HH:mm"
    dtd_path: Optional[str] = None

    @field_validator('timezone')
    def validate_timezone(cls, v):
        try:
            # directory names such as "America" raise IsADirectoryError
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)
