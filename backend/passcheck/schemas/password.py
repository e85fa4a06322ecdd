"""
Password Schemas
Pydantic models that reject unacceptable passwords at construction.
"""

from typing import List
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from passcheck.services.policy import validate_password


class PasswordCandidate(BaseModel):
    dictionary: List[str] = Field(default_factory=list)
    password: str

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str, info: ValidationInfo) -> str:
        errors = validate_password(v, info.data.get("dictionary", []))
        if errors:
            raise ValueError("; ".join(errors))
        return v
