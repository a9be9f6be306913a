"""Anti-forgery token port."""

from abc import ABC, abstractmethod


class CsrfTokenValidator(ABC):
    """Issues and checks tokens that bind a destructive action to the caller's session."""

    @abstractmethod
    def generate(self, token_id: str) -> str:
        """Return the token a form must submit for ``token_id`` (e.g. ``delete42``)."""
        ...

    @abstractmethod
    def is_valid(self, token_id: str, token: str | None) -> bool:
        ...
