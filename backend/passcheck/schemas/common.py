from typing import List
from pydantic import BaseModel, ConfigDict, Field


class BaseResponse(BaseModel):
    """Base response model."""
    model_config = ConfigDict(frozen=True)


class PolicyVerdict(BaseResponse):
    """Outcome of checking one password against the policy."""
    acceptable: bool
    violations: List[str] = Field(default_factory=list)
    similar_words: List[str] = Field(default_factory=list)
