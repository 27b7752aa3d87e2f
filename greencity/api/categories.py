"""카테고리 라우터."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.api.deps import require_moderator
from greencity.database import get_db
from greencity.models.user import User
from greencity.schemas.category import CategoryDto, CategoryResponse
from greencity.services.category_service import category_service

router: APIRouter = APIRouter(prefix="/category", tags=["Categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[CategoryResponse]:
    """모든 카테고리를 조회합니다."""
    return await category_service.find_all(db)


@router.post("", response_model=CategoryResponse, status_code=201)
async def create_category(
    data: CategoryDto,
    db: Annotated[AsyncSession, Depends(get_db)],
    _moderator: Annotated[User, Depends(require_moderator)],
) -> CategoryResponse:
    """새 카테고리를 생성합니다."""
    result: CategoryResponse = await category_service.create(db, data)
    await db.commit()
    return result
