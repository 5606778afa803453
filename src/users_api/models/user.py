"""
User-related Pydantic models
"""

import re
from datetime import date
from typing import Any, Mapping
from pydantic import BaseModel, Field, validator

# Earliest accepted date of birth
MIN_DATE_OF_BIRTH = date(1900, 1, 1)
MAX_NAME_LENGTH = 255
ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


class UserWriteRequest(BaseModel):
    """Body accepted by create and update; age and id are never accepted"""
    name: str = Field(..., description="Display name of the user")
    dob: date = Field(..., description="Date of birth, YYYY-MM-DD")

    class Config:
        extra = "forbid"

    @validator('name')
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError('name cannot be empty')
        v = v.strip()
        if len(v) > MAX_NAME_LENGTH:
            raise ValueError(f'name cannot exceed {MAX_NAME_LENGTH} characters')
        return v

    @validator('dob', pre=True)
    def validate_dob_format(cls, v):
        # Only YYYY-MM-DD strings on the wire; numbers would parse as timestamps
        if isinstance(v, date):
            return v
        if not isinstance(v, str) or not ISO_DATE_PATTERN.fullmatch(v):
            raise ValueError('dob must be a YYYY-MM-DD string')
        return v

    @validator('dob')
    def validate_dob(cls, v):
        if v > date.today():
            raise ValueError('dob cannot be in the future')
        if v < MIN_DATE_OF_BIRTH:
            raise ValueError(f'dob cannot be before {MIN_DATE_OF_BIRTH.isoformat()}')
        return v


class UserCreateRequest(UserWriteRequest):
    pass


class UserUpdateRequest(UserWriteRequest):
    pass


class User(BaseModel):
    """A stored users row"""
    id: int
    name: str
    dob: date

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "User":
        return cls(id=record['id'], name=record['name'], dob=record['dob'])


class UserResponse(BaseModel):
    id: int
    name: str
    dob: date
    age: int
