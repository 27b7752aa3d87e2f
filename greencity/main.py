"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 핸들러, 라우터 등록.

FastAPI application entry point — middleware, exception handlers and
router registration.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from greencity.api import api_router
from greencity.config import settings
from greencity.middleware.request_logging import RequestLoggingMiddleware

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# 요청 로깅 미들웨어 — CORS보다 먼저 등록하여 모든 요청을 캡처
app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """검증 오류를 필드 단위 목록으로 변환합니다.

    Flatten pydantic errors to ``{"field", "message"}`` pairs; the field is
    the dotted location without its ``body``/``query``/``path`` prefix.
    """
    errors: list[dict[str, str]] = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        message: str = error.get("msg", "Invalid value").removeprefix("Value error, ")
        errors.append({"field": ".".join(loc), "message": message})
    return errors


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 실패를 400 및 필드별 오류 목록으로 응답합니다.

    Reject malformed requests with 400 and a structured field error list.
    """
    errors = _field_errors(exc)
    logger.warning("Validation error for %s: %s", request.url.path, errors)
    return JSONResponse(status_code=400, content={"detail": "Validation failed", "errors": errors})


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트."""
    return {"status": "ok"}


app.include_router(api_router)
