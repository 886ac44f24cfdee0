"""CleanConfig Pydantic model: per-call pipeline toggles."""

from pydantic import BaseModel, ConfigDict


class CleanConfig(BaseModel):
    """Optional pipeline stages.

    Attribute stripping always runs.  Defaults match the reference tool:
    everything on except ``remove_br_tags``.  Unknown option names are
    rejected.
    """

    model_config = ConfigDict(extra="forbid")

    beautify: bool = True
    normalize_text: bool = True
    remove_empty_tags: bool = True
    remove_br_tags: bool = False
    fix_punctuation: bool = True
