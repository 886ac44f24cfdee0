"""Public re-exports of all model types."""

from models.config import CleanConfig
from models.request import CleanRequest
from models.response import PipelineResult
from models.stats import AttributeStats

__all__ = [
    "AttributeStats",
    "CleanConfig",
    # Request/Response
    "CleanRequest",
    "PipelineResult",
]
