"""Credential service — one-way transform of passwords."""

from typing import Protocol, Sequence

from passlib.context import CryptContext

from twodo.config import get_settings


class CredentialHasher(Protocol):
    def hash(self, secret: str) -> str:
        ...

    def verify(self, secret: str, hashed: str) -> bool:
        ...


class PasslibHasher:
    """CredentialHasher backed by a passlib CryptContext."""

    def __init__(self, schemes: Sequence[str] | None = None):
        schemes = list(schemes or get_settings().PASSWORD_SCHEMES)
        self.pwd_context = CryptContext(schemes=schemes, deprecated="auto")

    def hash(self, secret: str) -> str:
        return self.pwd_context.hash(secret)

    def verify(self, secret: str, hashed: str) -> bool:
        # Unrecognized hash formats count as a mismatch
        try:
            return self.pwd_context.verify(secret, hashed)
        except ValueError:
            return False
