"""
Persisted document entities.

The remote JSON uses camelCase keys (``projects``, ``thumbnailUrl``,
``global`` ...); the models expose snake_case attributes and serialize
back with aliases so the stored shape never changes.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from gistfolio.domain.enums import AccentMode

DEFAULT_ACCENT_COLOR = "#f0d0d3"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class EntryDraft(_CamelModel):
    """An entry before it has been assigned an id"""

    title: str = ""
    client: str = ""
    description: str = ""
    category: str = ""
    video_id: str = Field(default="", alias="youtubeId")
    thumbnail_url: str = ""
    is_featured: bool = False


class Entry(EntryDraft):
    """One portfolio item"""

    id: int


class AboutData(_CamelModel):
    """Singleton descriptive record for the about page"""

    title: str = ""
    description: str = ""
    bio: str = ""
    skills: list[str] = Field(default_factory=list)
    email: str = ""
    instagram: str = ""
    youtube: str = ""


class GlobalSettings(_CamelModel):
    """Site-wide display settings"""

    accent_mode: AccentMode = AccentMode.CUSTOM
    custom_color: str = DEFAULT_ACCENT_COLOR


class Document(_CamelModel):
    """The whole persisted aggregate"""

    entries: list[Entry] = Field(default_factory=list, alias="projects")
    about: AboutData | None = None
    settings: GlobalSettings | None = Field(default=None, alias="global")

    def to_json(self, indent: int | None = 2) -> str:
        """JSON text in the stored (camelCase) shape; absent singletons are omitted"""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
