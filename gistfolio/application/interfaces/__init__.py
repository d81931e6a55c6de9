from gistfolio.application.interfaces.services import (
    IColorExtractor,
    IDocumentStore,
    ISessionHolder,
    IVideoMetadataProvider,
    PersistAck,
    VideoMetadata,
)

__all__ = [
    "IColorExtractor",
    "IDocumentStore",
    "ISessionHolder",
    "IVideoMetadataProvider",
    "PersistAck",
    "VideoMetadata",
]
