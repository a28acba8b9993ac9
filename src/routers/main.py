from fastapi import APIRouter

router = APIRouter(tags=["Main"])


@router.get("/health")
async def health() -> dict:
    """Проверка жизнеспособности приложения."""
    return {"app": "ok"}
