"""도메인 열거형 정의.

Domain enumerations shared by ORM models and schemas.
Every enum is a ``str`` enum so values serialize as their names in JSON.
"""

import enum

from greencity.utils.exceptions import BadRequestError


class PlaceStatus(str, enum.Enum):
    """장소 생명주기 상태.

    Lifecycle state of a place. ``DELETED`` is a soft delete: rows are never
    removed physically.
    """

    PROPOSED = "PROPOSED"
    DECLINED = "DECLINED"
    APPROVED = "APPROVED"
    DELETED = "DELETED"

    @classmethod
    def parse(cls, value: str) -> "PlaceStatus":
        """문자열을 상태 값으로 변환합니다 (대소문자 무시).

        Parse a status name case-insensitively.

        Raises:
            BadRequestError: 알 수 없는 상태 이름 (Unknown status name)
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            allowed: str = ", ".join(s.value for s in cls)
            raise BadRequestError(
                f"Unknown place status '{value}'. Allowed values: {allowed}"
            ) from None


class UserRole(str, enum.Enum):
    """사용자 역할 — User role."""

    ROLE_USER = "ROLE_USER"
    ROLE_MODERATOR = "ROLE_MODERATOR"
    ROLE_ADMIN = "ROLE_ADMIN"

    @property
    def is_moderator(self) -> bool:
        return self in (UserRole.ROLE_MODERATOR, UserRole.ROLE_ADMIN)


class WeekDay(str, enum.Enum):
    """요일 — Day of week, ordered Monday first to match ``date.weekday()``."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def from_index(cls, index: int) -> "WeekDay":
        return list(cls)[index]
