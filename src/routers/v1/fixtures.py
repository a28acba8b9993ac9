"""
Роутер с информацией о загруженных фикстурах.
"""

from fastapi import APIRouter, Request

router = APIRouter(prefix="/fixtures", tags=["Fixtures"])


@router.get("")
async def list_fixtures(request: Request) -> dict:
    """
    Возвращает ссылки, загруженные при старте приложения.

    Returns:
        dict: Количество ссылок и соответствие имя -> класс объекта.
    """
    references = getattr(request.app.state, "fixture_references", {})
    return {"count": len(references), "references": references}
