"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """JSON body of a failed closures request."""

    model_config = ConfigDict(frozen=True)

    error: str
    detail: str | None = None
    status: int | None = None
    body: str | None = None
