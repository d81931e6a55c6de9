"""Domain entities."""

from gistfolio.domain.entities.document import (
    DEFAULT_ACCENT_COLOR,
    AboutData,
    Document,
    Entry,
    EntryDraft,
    GlobalSettings,
)
from gistfolio.domain.entities.portfolio import PortfolioDocument

__all__ = [
    "DEFAULT_ACCENT_COLOR",
    "AboutData",
    "Document",
    "Entry",
    "EntryDraft",
    "GlobalSettings",
    "PortfolioDocument",
]
