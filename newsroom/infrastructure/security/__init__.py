from .csrf import SessionCsrfTokenManager

__all__ = [
    "SessionCsrfTokenManager",
]
