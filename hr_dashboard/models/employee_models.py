"""
Employee Models
Stored employee records and the payload accepted on create/update.
"""
import math
from datetime import date
from typing import Any, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from hr_dashboard.utils.date_utils import parse_date

EmployeeStatus = Literal["Permanent", "Job Order", "Co-Term"]

MIN_RATING = 0.0
MAX_RATING = 5.0


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _lenient_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _lenient_int(value: Any) -> Optional[int]:
    number = _lenient_float(value)
    return int(number) if number is not None else None


class Employee(CamelModel):
    """
    An employee record as stored.
    Values read back from storage are coerced leniently: malformed dates,
    malformed or out-of-range ratings, and malformed hours become None
    instead of failing the whole read.
    """
    id: str
    name: str = ""
    department: str = ""
    birth_date: Optional[date] = None
    age: int = 0
    performance_rating: Optional[float] = None
    training_hours: Optional[int] = None
    status: Optional[str] = None

    @field_validator("name", "department", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("birth_date", mode="before")
    @classmethod
    def _parse_birth_date(cls, value: Any) -> Optional[date]:
        return parse_date(value)

    @field_validator("age", mode="before")
    @classmethod
    def _parse_age(cls, value: Any) -> int:
        return _lenient_int(value) or 0

    @field_validator("performance_rating", mode="before")
    @classmethod
    def _parse_rating(cls, value: Any) -> Optional[float]:
        rating = _lenient_float(value)
        if rating is None or not MIN_RATING <= rating <= MAX_RATING:
            return None
        return rating

    @field_validator("training_hours", mode="before")
    @classmethod
    def _parse_hours(cls, value: Any) -> Optional[int]:
        return _lenient_int(value)

    @field_validator("status", mode="before")
    @classmethod
    def _blank_status(cls, value: Any) -> Optional[str]:
        if value is None or str(value).strip() == "":
            return None
        return str(value)


class EmployeePayload(CamelModel):
    """
    Body of create/update requests. Age is never accepted from the client;
    it is recomputed from birthDate on every write.
    """
    id: Optional[str] = None
    name: str = Field(min_length=1)
    department: str = ""
    birth_date: Optional[date] = None
    performance_rating: Optional[float] = Field(default=None, ge=MIN_RATING, le=MAX_RATING)
    training_hours: Optional[int] = Field(default=None, ge=0)
    status: EmployeeStatus = "Permanent"

    @field_validator("id", "birth_date", "performance_rating", "training_hours", mode="before")
    @classmethod
    def _empty_string_is_none(cls, value: Any) -> Any:
        # The dashboard form posts "" for untouched optional fields
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @field_validator("department", mode="before")
    @classmethod
    def _department_or_empty(cls, value: Any) -> Any:
        return "" if value is None else value
