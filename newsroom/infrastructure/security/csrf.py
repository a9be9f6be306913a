"""Session-bound anti-forgery tokens.

A random secret is stored once per client session (the Starlette session
cookie, signed by ``SessionMiddleware``). The token for an action id such
as ``delete42`` is an HMAC of that secret and the id under the application
key, so it is valid only for that action, that resource and that session.
"""

import hashlib
import hmac
import secrets
from collections.abc import MutableMapping
from typing import Any

from newsroom.application.interfaces import CsrfTokenValidator

SESSION_KEY = "_csrf_secret"


class SessionCsrfTokenManager(CsrfTokenValidator):
    """CsrfTokenValidator backed by a per-session secret."""

    def __init__(self, secret_key: str, session: MutableMapping[str, Any]):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._key = secret_key.encode("utf-8")
        self._session = session

    def _session_secret(self, *, create: bool) -> str | None:
        value = self._session.get(SESSION_KEY)
        if value is None and create:
            value = secrets.token_urlsafe(32)
            self._session[SESSION_KEY] = value
        return value

    def _sign(self, session_secret: str, token_id: str) -> str:
        message = f"{session_secret}:{token_id}".encode("utf-8")
        return hmac.new(self._key, message, hashlib.sha256).hexdigest()

    def generate(self, token_id: str) -> str:
        return self._sign(self._session_secret(create=True), token_id)

    def is_valid(self, token_id: str, token: str | None) -> bool:
        if not token:
            return False
        session_secret = self._session_secret(create=False)
        if session_secret is None:
            return False
        return hmac.compare_digest(self._sign(session_secret, token_id), token)
