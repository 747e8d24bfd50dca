import logging

from fastapi import APIRouter, HTTPException, Request

from ..errors import DocumentLoadFailed, NoReadableContent
from ..models.content import EPUBExtractionResult
from ..services.epub_service import EPUBService
from ._uploads import read_document_body

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/epub", tags=["epub"])

# Initialize services
epub_service = EPUBService()


@router.post("/extract", response_model=EPUBExtractionResult)
async def extract_epub(request: Request) -> EPUBExtractionResult:
    """
    Extract the ordered chapters of an EPUB sent as the raw request body
    """
    try:
        data = await read_document_body(request)
        result = await epub_service.extract_async(data)
        logger.info(f"EPUB extracted: {result.total_chapters} chapters")
        return result
    except HTTPException:
        raise
    except (DocumentLoadFailed, NoReadableContent) as e:
        logger.warning(f"EPUB unreadable: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Error extracting EPUB: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error extracting EPUB: {str(e)}")
