"""Session-scoped credential holders"""

from gistfolio.infrastructure.session.session_holder import (
    FileSessionHolder,
    InMemorySessionHolder,
    default_session_path,
)

__all__ = ["FileSessionHolder", "InMemorySessionHolder", "default_session_path"]
