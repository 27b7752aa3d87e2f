"""요청 파라미터 파싱 유틸리티.

Boundary parsing helpers for raw query parameters.
"""

import re

from greencity.constants import MAX_ID
from greencity.utils.exceptions import BadRequestError

# ASCII 숫자만 허용 (부호, 밑줄, 전각 숫자 거부)
_ID_TOKEN = re.compile(r"\d+", re.ASCII)


def parse_id_list(raw: str) -> list[int]:
    """쉼표로 구분된 ID 문자열을 정수 목록으로 변환합니다.

    Parse ``"1,2,3"`` into ``[1, 2, 3]``. Surrounding whitespace is ignored;
    a token that is empty, not plain ASCII digits, or beyond the 64-bit id
    range rejects the whole list.

    Raises:
        BadRequestError: 정수가 아닌 토큰이 포함됨 (Malformed id present)
    """
    ids: list[int] = []
    for token in raw.split(","):
        token = token.strip()
        if not _ID_TOKEN.fullmatch(token) or int(token) > MAX_ID:
            raise BadRequestError(f"Invalid id '{token}' in ids parameter '{raw}'")
        ids.append(int(token))
    return ids
