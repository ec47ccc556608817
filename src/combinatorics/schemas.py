# src/combinatorics/schemas.py
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field, RootModel, field_validator


class ParameterSpace(RootModel[Dict[str, List[Any]]]):
    """Kategorie -> Werteliste. Reihenfolge der Kategorien bleibt erhalten."""

    @field_validator("root")
    @classmethod
    def _names_not_blank(cls, v: Dict[str, List[Any]]) -> Dict[str, List[Any]]:
        for name in v:
            if not name.strip():
                raise ValueError("category name must not be empty")
        return v


class GenerateRequest(BaseModel):
    padding: Literal["random", "cyclic"] = "random"
    seed: Optional[int] = None  # nur für reproduzierbares Auffüllen
    name_prefix: str = Field(default="TC_", min_length=1)


class TestCaseOut(BaseModel):
    name: str
    assignments: Dict[str, Any]


class GenerateResponse(BaseModel):
    strategy: str = "one-wise"
    count: int
    testcases: List[TestCaseOut]
    coverage_meta: Dict[str, Any]
