"""할인 종류(Specification) 스키마.

Specification name schema shared by discount payloads and filters.
"""

from pydantic import BaseModel, field_validator

from greencity.constants import EMPTY_SPECIFICATION_NAME


class SpecificationNameDto(BaseModel):
    """할인 종류 이름 스키마 — 비어 있을 수 없음.

    Attributes:
        name: 할인 종류 이름 (Specification name, non-empty after trimming)
    """

    name: str

    @field_validator("name")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError(EMPTY_SPECIFICATION_NAME)
        return value
