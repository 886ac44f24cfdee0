"""CleanRequest Pydantic model with strict validation (extra=forbid)."""

from pydantic import BaseModel, ConfigDict

from models.config import CleanConfig


class CleanRequest(BaseModel):
    """Incoming request body for the POST /clean endpoint.

    Extra fields are rejected with a 422 response.
    """

    model_config = ConfigDict(extra="forbid")

    html: str
    options: CleanConfig = CleanConfig()
