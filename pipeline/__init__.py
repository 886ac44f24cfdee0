"""Cleaning pipeline: orchestrator and fail-open stages."""

from pipeline.orchestrator import run
from pipeline.stages import StageFailure

__all__ = ["StageFailure", "run"]
