"""Pipeline entry point.

Sequences the cleaning stages in a fixed order, whichever are enabled::

    parse -> strip attributes -> [normalize text] -> serialize
          -> [fix punctuation] -> [remove <br>] -> [prune empty elements]
          -> [beautify]

Only the first parse can fail the run (``ParseFailure``).  After that the
pipeline always returns *some* markup: a failing optional stage is logged,
recorded in ``PipelineResult.skipped_stages`` and skipped.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from models.config import CleanConfig
from models.response import PipelineResult
from models.stats import AttributeStats
from parsing.markup import parse_fragment, serialize
from parsing.stripping import strip_attributes
from pipeline.stages import (
    StageFailure,
    beautify_stage,
    line_break_stage,
    normalize_stage,
    prune_stage,
    punctuation_stage,
)

logger = logging.getLogger("stripper")

T = TypeVar("T")


def _apply(
    func: Callable[[T], str],
    value: T,
    fallback: str,
    skipped: list[str],
) -> str:
    """Run one optional stage, returning *fallback* if it fails."""
    try:
        return func(value)
    except StageFailure as exc:
        logger.warning(
            "stage failed, keeping its input",
            extra={"stage": exc.stage, "error": str(exc)},
        )
        skipped.append(exc.stage)
        return fallback


def run(raw_markup: str, config: CleanConfig | None = None) -> PipelineResult:
    """Clean *raw_markup* according to *config*.

    Args:
        raw_markup: Arbitrary text, not necessarily well-formed markup.
        config: Stage toggles; ``CleanConfig()`` defaults when omitted.

    Returns:
        A ``PipelineResult`` with the cleaned fragment and attribute stats.
        Blank input gives ``""`` and empty stats.

    Raises:
        ParseFailure: If the input cannot be parsed at all.
    """
    if config is None:
        config = CleanConfig()
    if not raw_markup.strip():
        return PipelineResult(cleaned_markup="", stats=AttributeStats())

    nodes = parse_fragment(raw_markup)
    stats = strip_attributes(nodes)
    skipped: list[str] = []

    markup = serialize(nodes)
    if config.normalize_text:
        markup = _apply(normalize_stage, nodes, markup, skipped)
    if config.fix_punctuation:
        markup = _apply(punctuation_stage, markup, markup, skipped)
    if config.remove_br_tags:
        markup = _apply(line_break_stage, markup, markup, skipped)
    if config.remove_empty_tags:
        markup = _apply(prune_stage, markup, markup, skipped)
    if config.beautify:
        markup = _apply(beautify_stage, markup, markup, skipped)

    logger.info(
        "cleaned fragment",
        extra={
            "input_chars": len(raw_markup),
            "output_chars": len(markup),
            "removed_count": stats.removed_count,
        },
    )
    return PipelineResult(cleaned_markup=markup, stats=stats, skipped_stages=skipped)
