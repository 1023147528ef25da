"""Health Check Controller."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """서비스 헬스 체크. 의존성 상태와 무관하게 항상 ok."""
    return {"status": "ok"}
