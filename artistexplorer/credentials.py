"""Client credential loading."""

from __future__ import annotations

import io
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from dotenv import dotenv_values, load_dotenv

from artistexplorer.exceptions import CredentialsError
from artistexplorer.logger import get_logger

logger = get_logger(__name__)

CREDENTIALS_ENV_VAR = "ARTISTEXPLORER_CREDENTIALS"

# key, then the first "=", ":" or run of whitespace, then the value
_PROPERTY_LINE = re.compile(r"^\s*([^=:\s]+)\s*[=:\s]\s*(.*?)\s*$")


def parse_properties(text: str) -> Dict[str, str]:
    """Parse Java-style properties: ``key=value``, ``key: value`` or ``key value``."""
    values: Dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped[0] in "#!":
            continue
        match = _PROPERTY_LINE.match(line)
        if match:
            values[match.group(1)] = match.group(2)
        else:
            values[stripped] = ""
    return values


@dataclass(frozen=True)
class Credentials:
    """Immutable client id / secret pair for the client-credentials grant."""

    client_id: str
    client_secret: str

    def __post_init__(self) -> None:
        if not (self.client_id and self.client_secret):
            raise CredentialsError("client_id and client_secret must both be set")

    def __repr__(self) -> str:
        return f"Credentials(client_id={self.client_id!r}, client_secret='***')"

    @classmethod
    def from_properties(cls, path: Path | str) -> Credentials:
        """
        Load credentials from a key-value file.

        Files ending in ``.env`` are read with python-dotenv; anything else is
        read as a Java-style properties file. Either way the file must define
        ``client_id`` and ``client_secret``.

        Raises:
            CredentialsError: If the file is missing, unreadable or lacks either key
        """
        path = Path(path)
        if not path.is_file():
            raise CredentialsError(f"Credentials file not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CredentialsError(f"Cannot read credentials file {path}: {e}") from e

        if path.name.endswith(".env"):
            values = dotenv_values(stream=io.StringIO(text))
        else:
            values = parse_properties(text)
        logger.debug(f"Loaded credentials file {path}")
        return cls(
            client_id=(values.get("client_id") or "").strip(),
            client_secret=(values.get("client_secret") or "").strip(),
        )

    @classmethod
    def from_env(cls) -> Credentials:
        """Load credentials from SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET."""
        load_dotenv()  # Best-effort env load

        client_id = os.getenv("SPOTIFY_CLIENT_ID")
        client_secret = os.getenv("SPOTIFY_CLIENT_SECRET")
        if not (client_id and client_secret):
            raise CredentialsError("SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET must be set")
        return cls(client_id=client_id, client_secret=client_secret)


def load_credentials(path: Path | str | None = None) -> Credentials:
    """
    Resolve credentials from, in order: ``path``, the file named by
    ``ARTISTEXPLORER_CREDENTIALS``, then the environment.
    """
    load_dotenv()
    path = path or os.getenv(CREDENTIALS_ENV_VAR)
    if path:
        return Credentials.from_properties(path)
    return Credentials.from_env()
