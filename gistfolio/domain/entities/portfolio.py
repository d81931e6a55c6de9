"""
Portfolio document aggregate.

Wraps the persisted Document and is the only place where entries are
mutated, so the id and single-hero rules hold after every operation.
"""

from dataclasses import dataclass, field

from gistfolio.domain.entities.document import (
    AboutData,
    Document,
    Entry,
    EntryDraft,
    GlobalSettings,
)
from gistfolio.domain.exceptions import EntryNotFoundError


@dataclass
class PortfolioDocument:
    """
    In-memory materialized document with invariant enforcement.

    Invariants:
    - entry ids are unique; new entries get max(id) + 1, or 1 when empty
    - at most one entry has is_featured set
    - entry order is display order and is persisted as-is
    """

    entries: list[Entry] = field(default_factory=list)
    about: AboutData | None = None
    settings: GlobalSettings | None = None

    @classmethod
    def from_document(cls, document: Document) -> "PortfolioDocument":
        snapshot = document.model_copy(deep=True)
        return cls(
            entries=list(snapshot.entries),
            about=snapshot.about,
            settings=snapshot.settings,
        )

    def to_document(self) -> Document:
        """Deep copy of the current state as a persistable Document"""
        return Document(
            entries=[entry.model_copy(deep=True) for entry in self.entries],
            about=self.about.model_copy(deep=True) if self.about else None,
            settings=self.settings.model_copy(deep=True) if self.settings else None,
        )

    @property
    def featured_entry(self) -> Entry | None:
        return next((entry for entry in self.entries if entry.is_featured), None)

    def next_id(self) -> int:
        if not self.entries:
            return 1
        return max(entry.id for entry in self.entries) + 1

    def get_entry(self, entry_id: int) -> Entry:
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        raise EntryNotFoundError(entry_id)

    def _index_of(self, entry_id: int) -> int:
        for index, entry in enumerate(self.entries):
            if entry.id == entry_id:
                return index
        raise EntryNotFoundError(entry_id)

    def _clear_featured(self, keep_id: int) -> None:
        """Single-hero rule: unfeature every entry except keep_id"""
        self.entries = [
            entry if entry.id == keep_id or not entry.is_featured
            else entry.model_copy(update={"is_featured": False})
            for entry in self.entries
        ]

    def add_entry(self, draft: EntryDraft) -> Entry:
        """Assign the next id and prepend (newest first)"""
        data = draft.model_dump(exclude={"id"})
        entry = Entry(id=self.next_id(), **data)
        self.entries.insert(0, entry)
        if entry.is_featured:
            self._clear_featured(keep_id=entry.id)
        return entry

    def update_entry(self, entry: Entry) -> Entry:
        """Replace the entry with the same id, keeping its position"""
        index = self._index_of(entry.id)
        updated = entry.model_copy(deep=True)
        self.entries[index] = updated
        if updated.is_featured:
            self._clear_featured(keep_id=updated.id)
        return updated

    def remove_entry(self, entry_id: int) -> Entry:
        index = self._index_of(entry_id)
        return self.entries.pop(index)

    def reorder(self, new_order: list[Entry]) -> None:
        """
        Replace the sequence wholesale.

        Callers must pass a permutation of the current entries; this is
        not enforced.
        """
        self.entries = [entry.model_copy(deep=True) for entry in new_order]

    def is_permutation(self, new_order: list[Entry]) -> bool:
        return sorted(entry.id for entry in new_order) == sorted(
            entry.id for entry in self.entries
        )

    def replace_about(self, about: AboutData | None) -> None:
        self.about = about.model_copy(deep=True) if about else None

    def replace_settings(self, settings: GlobalSettings | None) -> None:
        self.settings = settings.model_copy(deep=True) if settings else None
