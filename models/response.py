"""PipelineResult Pydantic model returned by the pipeline and POST /clean."""

from pydantic import BaseModel

from models.stats import AttributeStats


class PipelineResult(BaseModel):
    """Cleaned markup plus attribute statistics.

    ``skipped_stages`` names optional stages that failed and passed their
    input through unchanged, in pipeline order.
    """

    cleaned_markup: str
    stats: AttributeStats = AttributeStats()
    skipped_stages: list[str] = []
