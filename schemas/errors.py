from typing import Literal, Optional

from pydantic import BaseModel, Field


class ErrorMessage(BaseModel):
    error: str = Field(..., description="The error message")


class ValidationErrorItem(BaseModel):
    value: Optional[str] = Field(None, description="The value that failed validation")
    message: str = Field(..., description="The error message")
    parameter: str = Field(..., description="The parameter that failed validation")
    location: Literal["query", "path"] = Field(
        ..., description="Where the parameter was found: the query string or the path"
    )


class ErrorList(BaseModel):
    errors: list[ValidationErrorItem]
