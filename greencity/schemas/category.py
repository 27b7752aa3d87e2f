"""카테고리 요청/응답 스키마.

Category request/response schemas.
"""

from pydantic import BaseModel, field_validator

from greencity.constants import EMPTY_CATEGORY_NAME


class CategoryDto(BaseModel):
    """카테고리 이름 스키마 (장소 제안 및 카테고리 생성 요청에 사용).

    Attributes:
        name: 카테고리 이름 (Category name, non-empty)
    """

    name: str

    @field_validator("name")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError(EMPTY_CATEGORY_NAME)
        return value


class CategoryResponse(BaseModel):
    """카테고리 응답 스키마."""

    id: int
    name: str
