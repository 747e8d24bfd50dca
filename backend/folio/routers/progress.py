from fastapi import APIRouter, Query
from pydantic import BaseModel

from ..services.progress import progress_percentage

router = APIRouter(prefix="/progress", tags=["progress"])


class ProgressResponse(BaseModel):
    current: int
    total: int
    percentage: int


@router.get("", response_model=ProgressResponse)
async def get_progress(
    current: int = Query(..., description="Current page or chapter ordinal"),
    total: int = Query(..., description="Total pages or chapters"),
) -> ProgressResponse:
    """
    Map a reading position to a percentage
    """
    return ProgressResponse(
        current=current, total=total, percentage=progress_percentage(current, total)
    )
