"""Engine Options — Pydantic model validating ItemListEngine construction parameters.

Invariants:
    - search_properties: tuple of stripped, non-empty names, de-duplicated in first-seen order
    - A bare str is rejected (pydantic does not treat str as a sequence of names)

Design Decisions:
    - field_validator for side-effect-free transforms (strip, dedupe) — keeps the model pure
    - frozen: options are fixed for the engine's lifetime
"""

from pydantic import BaseModel, ConfigDict, field_validator


class EngineOptions(BaseModel):
    """Validated options for one engine instance."""

    model_config = ConfigDict(frozen=True)

    search_properties: tuple[str, ...] = ()

    @field_validator("search_properties")
    @classmethod
    def normalize_search_properties(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for name in v:
            name = name.strip()
            if not name:
                raise ValueError("search property names cannot be empty or whitespace")
            seen.setdefault(name, None)
        return tuple(seen)
