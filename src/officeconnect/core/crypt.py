"""Signed hashes for links handed to the document server."""

from __future__ import annotations

import logging
from typing import Any

from jose import JWTError, jwt

from .config import Settings, get_settings_instance

logger = logging.getLogger(__name__)


class Crypt:
    """Hash generator backed by HS256 JSON Web Tokens."""

    algorithm = "HS256"

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings_instance()
        self.secret_key = settings.secret_key

        if not self.secret_key:
            raise ValueError("OFFICECONNECT_SECRET_KEY not configured in settings")

    def get_hash(self, payload: dict[str, Any]) -> str:
        """Sign *payload* and return the token."""
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def read_hash(self, token: str) -> tuple[dict[str, Any] | None, str | None]:
        """Decode a token produced by ``get_hash``.

        Returns ``(payload, None)`` on success and ``(None, "Invalid hash")``
        when the token is malformed or signed with another key.
        """
        if not token:
            return None, "Invalid hash"
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm]), None
        except JWTError as e:
            logger.warning(f"Hash verification failed: {e}")
            return None, "Invalid hash"
