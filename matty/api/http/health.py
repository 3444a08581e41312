from fastapi import APIRouter

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health():
    """Проверка, что сервис запущен"""
    return {"status": "ok", "message": "Matty API is running"}
