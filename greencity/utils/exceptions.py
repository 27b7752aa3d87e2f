"""서비스 계층 HTTP 예외.

HTTP errors raised by services and dependencies. Each subclass fixes its
status code and a default message; FastAPI renders them as
``{"detail": "..."}``.

Usage:
    from greencity.utils.exceptions import NotFoundError
    raise NotFoundError(f"Place not found by id: {place_id}")
"""

from fastapi import HTTPException, status


class GreenCityError(HTTPException):
    """도메인 HTTP 예외의 공통 부모."""

    code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(status_code=self.code, detail=detail or self.default_detail)


class BadRequestError(GreenCityError):
    """400 — 스키마로 잡을 수 없는 잘못된 입력.

    Unknown status names, malformed id lists, unparsable filter times,
    filters missing their map bounds.
    """

    code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"


class UnauthorizedError(GreenCityError):
    """401 — 토큰 없음/만료, 잘못된 자격 증명."""

    code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication required"


class ForbiddenError(GreenCityError):
    """403 — 모더레이터 권한 필요."""

    code = status.HTTP_403_FORBIDDEN
    default_detail = "Moderator or admin role required"


class NotFoundError(GreenCityError):
    """404 — 장소, 할인, 사용자, 즐겨찾기 없음."""

    code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"


class DuplicateError(GreenCityError):
    """409 — 이름 중복 카테고리, 이미 등록된 이메일, 중복 즐겨찾기."""

    code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists"
