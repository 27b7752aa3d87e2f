"""도메인 상수 모듈.

Domain constants shared across services and schemas.
"""

# 하버사인 공식의 지구 반지름(km) — Earth radius used by the Haversine formula
HAVERSINE_EARTH_RADIUS_KM: int = 6371

# 검증 메시지 — Validation messages
EMPTY_SPECIFICATION_NAME: str = "Specification name must not be empty"
EMPTY_PLACE_NAME: str = "Place name must not be empty"
EMPTY_CATEGORY_NAME: str = "Category name must not be empty"
BAD_DISCOUNT_VALUE: str = "Discount value must be between 0 and 100"
BAD_OPENING_HOURS: str = "Opening time must be earlier than closing time"
BAD_MAP_BOUNDS: str = "South-west corner must not lie north of the north-east corner"

# 장소 이름 최대 길이 — Maximum place name length
PLACE_NAME_MAX_LENGTH: int = 100

# 엔티티 ID 상한 (BIGINT) — Largest id a BIGINT key column can hold
MAX_ID: int = 2**63 - 1
