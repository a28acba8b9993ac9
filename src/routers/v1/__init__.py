from fastapi import APIRouter

from .fixtures import router as fixtures_router

router = APIRouter()
router.include_router(fixtures_router)

__all__ = ["router"]
