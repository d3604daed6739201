"""Header schemas validated before the handler runs."""

from pydantic import BaseModel, ConfigDict, Field


class RequiredAuthorizationHeaders(BaseModel):
    """POST /headers requires an authorization header; other headers pass through."""

    model_config = ConfigDict(extra="allow")

    authorization: str = Field(..., min_length=1)
