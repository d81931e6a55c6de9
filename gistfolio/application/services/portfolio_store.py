"""Public, read-only view of the portfolio document"""
import asyncio

from gistfolio.application.interfaces import IColorExtractor, IDocumentStore
from gistfolio.domain.entities import DEFAULT_ACCENT_COLOR, AboutData, Entry, GlobalSettings
from gistfolio.domain.enums import AccentMode
from gistfolio.domain.exceptions import GistfolioException
from gistfolio.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class PortfolioStore:
    """
    Content for visitors: loaded anonymously, never written.

    Also resolves the accent colour: in hero mode the colour extracted
    from the featured entry's thumbnail wins once it is known, otherwise
    the configured custom colour is used.
    """

    def __init__(
        self,
        document_store: IDocumentStore,
        color_extractor: IColorExtractor | None = None,
    ) -> None:
        self.document_store = document_store
        self.color_extractor = color_extractor

        self.entries: list[Entry] = []
        self.about: AboutData | None = None
        self.settings = GlobalSettings()
        self.current_accent_color = DEFAULT_ACCENT_COLOR
        self.hero_accent_color: str | None = None
        self.entry_colors: dict[int, str] = {}

    async def init(self) -> bool:
        """Load content; on failure keep an empty portfolio and return False"""
        try:
            document = await self.document_store.fetch_document()
        except GistfolioException as e:
            logger.error(f"Failed to load content: {e.message}")
            return False

        self.entries = list(document.entries)
        self.about = document.about
        if document.settings:
            self.settings = document.settings
        return True

    def get_entry(self, entry_id: int) -> Entry | None:
        return next((entry for entry in self.entries if entry.id == entry_id), None)

    @property
    def featured_entry(self) -> Entry | None:
        return next((entry for entry in self.entries if entry.is_featured), None)

    def set_accent_color(self, color: str) -> None:
        self.current_accent_color = color

    def set_hero_accent_color(self, color: str) -> None:
        self.hero_accent_color = color

    @property
    def main_accent(self) -> str:
        if self.settings.accent_mode == AccentMode.HERO and self.hero_accent_color:
            return self.hero_accent_color
        return self.settings.custom_color

    async def process_grid_colors(self, entries: list[Entry] | None = None) -> dict[int, str]:
        """
        Extract a dominant colour for each entry thumbnail not yet processed.

        Individual extraction failures are logged and skipped.
        """
        if self.color_extractor is None:
            return self.entry_colors

        pending = [
            entry
            for entry in (self.entries if entries is None else entries)
            if entry.thumbnail_url and entry.id not in self.entry_colors
        ]
        results = await asyncio.gather(
            *(self.color_extractor.extract_dominant_color(e.thumbnail_url) for e in pending),
            return_exceptions=True,
        )
        for entry, result in zip(pending, results):
            if isinstance(result, BaseException):
                logger.warning("Colour extraction failed for entry %s: %s", entry.id, result)
                continue
            self.entry_colors[entry.id] = result
        return self.entry_colors
