"""bcrypt 비밀번호 해싱.

bcrypt only looks at the first 72 bytes of a password, so longer ones are
rejected instead of being silently truncated.
"""

import bcrypt

from greencity.config import settings
from greencity.utils.exceptions import BadRequestError

BCRYPT_MAX_BYTES: int = 72


def hash_password(password: str) -> str:
    """비밀번호를 해싱합니다 (라운드 수는 BCRYPT_ROUNDS).

    Raises:
        BadRequestError: UTF-8 기준 72바이트 초과 (Longer than 72 bytes)
    """
    raw: bytes = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        raise BadRequestError(f"Password must not exceed {BCRYPT_MAX_BYTES} bytes")
    return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    raw: bytes = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(raw, password_hash.encode("ascii"))
    except ValueError:
        # 손상된 해시 — malformed stored hash
        return False
