"""비밀번호 해싱 및 검증 유틸리티 모듈.

Password hashing and verification utility module.
Uses bcrypt directly for secure password storage.

PasswordEncoder is the capability AppUserService depends on; BcryptPasswordEncoder
is the production implementation and tests may pass any object with a
compatible ``encode`` method.
"""

from typing import Protocol

import bcrypt


def hash_password(password: str) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다.

    Hash a plain text password using bcrypt.
    The resulting hash includes a random salt, making each hash unique
    even for identical passwords.

    Args:
        password: 평문 비밀번호 (Plain text password to hash)

    Returns:
        str: bcrypt 해시 문자열 (Bcrypt hash string, ~60 chars)
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호와 bcrypt 해시를 비교 검증합니다.

    Verify a plain text password against a bcrypt hash.

    Args:
        plain_password: 검증할 평문 비밀번호 (Plain text password to verify)
        hashed_password: 저장된 bcrypt 해시 (Stored bcrypt hash to compare against)

    Returns:
        bool: 일치하면 True, 불일치하면 False (True if password matches hash)
    """
    return bcrypt.checkpw(
        plain_password.encode("utf-8"), hashed_password.encode("utf-8")
    )


class PasswordEncoder(Protocol):
    """단방향 비밀번호 인코더 인터페이스 (One-way password encoder contract)."""

    def encode(self, raw_password: str) -> str: ...

    def matches(self, raw_password: str, encoded_password: str) -> bool: ...


class BcryptPasswordEncoder:
    """bcrypt 기반 PasswordEncoder 구현 (bcrypt-backed PasswordEncoder)."""

    def encode(self, raw_password: str) -> str:
        return hash_password(raw_password)

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        return verify_password(raw_password, encoded_password)
