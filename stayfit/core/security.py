"""Security utilities (password and token hashing) for seeded accounts."""

import hashlib
import random

from passlib.context import CryptContext

password_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain: str) -> str:
    return password_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return password_context.verify(plain, hashed)


def random_token(rng: random.Random, nbytes: int = 32) -> str:
    """Opaque token drawn from the given random source (hex encoded)."""
    return rng.getrandbits(nbytes * 8).to_bytes(nbytes, "big").hex()


def hash_token(token: str) -> str:
    """SHA-256 digest stored instead of the raw session token."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
