"""Password hashing for accounts and note locks."""

from passlib.context import CryptContext

# bcrypt_sha256 pre-hashes with SHA-256, so passwords past bcrypt's 72 bytes still count
pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def needs_update(hashed_password: str) -> bool:
    """Check if the hash was made with outdated settings."""
    return pwd_context.needs_update(hashed_password)
