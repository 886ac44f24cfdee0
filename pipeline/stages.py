"""Optional pipeline stages with fail-open semantics.

Each stage takes the current markup (or tree) and returns new markup.
The ``stage`` decorator turns any exception raised inside a stage into a
``StageFailure`` naming it; the orchestrator catches that and carries on
with the stage's input unchanged.  Blank input short-circuits to ``""``
without touching the parser.
"""

from __future__ import annotations

import functools
from typing import Callable, TypeVar

from parsing.beautify import beautify_nodes
from parsing.breaks import remove_line_breaks
from parsing.markup import parse_fragment, serialize
from parsing.pruning import prune_empty
from parsing.punctuation import fix_punctuation
from parsing.text import normalize_text
from parsing.tree import Node

T = TypeVar("T")


class StageFailure(Exception):
    """An optional stage could not complete; its input should be kept."""

    def __init__(self, stage: str, cause: BaseException) -> None:
        super().__init__(f"{stage} failed: {type(cause).__name__}: {cause}")
        self.stage = stage
        self.cause = cause


def stage(name: str) -> Callable[[Callable[[T], str]], Callable[[T], str]]:
    """Wrap a stage so every failure surfaces as ``StageFailure(name)``."""

    def decorator(func: Callable[[T], str]) -> Callable[[T], str]:
        @functools.wraps(func)
        def wrapper(value: T) -> str:
            if isinstance(value, str) and not value.strip():
                return ""
            try:
                return func(value)
            except Exception as exc:  # noqa: BLE001
                raise StageFailure(name, exc) from exc

        return wrapper

    return decorator


@stage("normalize_text")
def normalize_stage(nodes: list[Node]) -> str:
    return serialize(normalize_text(nodes))


@stage("fix_punctuation")
def punctuation_stage(markup: str) -> str:
    return fix_punctuation(markup)


@stage("remove_br_tags")
def line_break_stage(markup: str) -> str:
    return remove_line_breaks(markup)


@stage("remove_empty_tags")
def prune_stage(markup: str) -> str:
    """Re-parse, drop empty elements, serialize."""
    return serialize(prune_empty(parse_fragment(markup)))


@stage("beautify")
def beautify_stage(markup: str) -> str:
    """Re-parse and pretty-print."""
    return beautify_nodes(parse_fragment(markup))
