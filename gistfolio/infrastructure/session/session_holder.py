"""
Credential holders that survive a reload but not a restart.

FileSessionHolder keeps the token in a private file under the user's
runtime directory ($XDG_RUNTIME_DIR is a tmpfs cleared at logout/reboot),
so a restarted admin process can restore its session while a rebooted
machine cannot.
"""

import os
import tempfile
from pathlib import Path

from gistfolio.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

FILE_PERMISSIONS = 0o600
DIR_PERMISSIONS = 0o700


def default_session_path(app_name: str = "gistfolio") -> Path:
    runtime_dir = os.environ.get("XDG_RUNTIME_DIR") or tempfile.gettempdir()
    return Path(runtime_dir) / app_name / "session"


class InMemorySessionHolder:
    """Holds the token for the lifetime of the process"""

    def __init__(self, token: str | None = None) -> None:
        self._token = token or None

    def save(self, token: str) -> None:
        self._token = token

    def load(self) -> str | None:
        return self._token

    def clear(self) -> None:
        self._token = None


class FileSessionHolder:
    """Holds at most one token in a 0o600 file"""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path else default_session_path()

    def save(self, token: str) -> None:
        self.path.parent.mkdir(mode=DIR_PERMISSIONS, parents=True, exist_ok=True)
        # Create with restrictive permissions before writing the secret
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_PERMISSIONS)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(token)
        logger.debug("Session saved to %s", self.path)

    def load(self) -> str | None:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
        logger.debug("Session cleared at %s", self.path)
