"""
Club Membership - FastAPI 웹 서버

회원 등록, 회비, 이벤트 체크인, 피드백 API
데이터 소스: Supabase
"""
import sys
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from app.config import ClubSettings
from app.club.exceptions import ClubError
from app.club.router import router as club_router


def configure_logging(settings: ClubSettings) -> None:
    """loguru 설정 (stderr + 일별 파일)"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=settings.log_level
    )
    logger.add(
        str(Path(settings.log_dir) / "club_{time:YYYY-MM-DD}.log"),
        rotation="1 day",
        retention="30 days",
        level="DEBUG"
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Club Membership",
        description="학생 단체 회원/회비/이벤트 체크인 관리",
        version="1.0.0"
    )

    @app.exception_handler(ClubError)
    async def club_error_handler(request: Request, exc: ClubError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} → {exc.status_code}: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} → {exc.status_code}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message}
        )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(club_router)

    return app


app = create_app()
