from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(description="Short error summary")
    details: str | None = Field(default=None, description="Underlying provider error, when available")
