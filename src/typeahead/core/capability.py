"""Backend capability selector — Whether the full-text engine may be used.

The capability is fixed at configuration time and injected into the
engine, so both retrieval paths can be exercised deterministically.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from typeahead.config.settings import FullTextSettings


class EngineCapability(BaseModel):
    """Read-only flag consulted by every content lookup."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=False, description="Full-text engine enabled for this process")

    def is_engine_available(self) -> bool:
        return self.enabled

    @classmethod
    def from_settings(cls, settings: FullTextSettings) -> EngineCapability:
        return cls(enabled=settings.enabled)
