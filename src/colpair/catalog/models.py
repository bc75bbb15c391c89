"""Data models for column catalogs."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Column(BaseModel):
    """A column offered for pairing."""

    model_config = ConfigDict(frozen=True)

    id: str  # Unique token within a catalog (e.g. "src_1")
    name: str
    type: Optional[str] = None  # Free-form type label (e.g. "VARCHAR")

    def label(self) -> str:
        """Human-readable label used by the CLI."""
        if self.type:
            return f"{self.name} ({self.type})"
        return self.name


class DuplicateColumnError(ValueError):
    """Exception raised when a catalog is built with repeated column ids."""

    pass
