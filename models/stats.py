"""AttributeStats Pydantic model: which attribute names were seen."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, computed_field

if TYPE_CHECKING:
    from parsing.classify import AttributeCategory


class AttributeStats(BaseModel):
    """Sorted, de-duplicated attribute names per category.

    ``preserved`` lists names that were kept; the other four list names
    that were removed.  Immutable once built.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    preserved: list[str] = []
    styling: list[str] = []
    unknown: list[str] = []
    data_attributes: list[str] = []
    event_handlers: list[str] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def preserved_count(self) -> int:
        return len(self.preserved)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def removed_count(self) -> int:
        return (
            len(self.styling)
            + len(self.unknown)
            + len(self.data_attributes)
            + len(self.event_handlers)
        )

    @classmethod
    def from_sets(cls, seen: Mapping[AttributeCategory, Iterable[str]]) -> AttributeStats:
        """Build stats from names grouped by category (any iterable, any order)."""
        return cls(**{category.value: sorted(set(names)) for category, names in seen.items()})
