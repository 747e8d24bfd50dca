import logging

from fastapi import APIRouter, HTTPException, Request

from ..errors import DocumentLoadFailed, PageOutOfRange, PageUnreadable
from ..models.content import Page, PDFDocumentInfo
from ..services.pdf_service import PDFService
from ._uploads import read_document_body

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pdf", tags=["pdf"])

# Initialize services
pdf_service = PDFService()


@router.post("/info", response_model=PDFDocumentInfo)
async def get_pdf_info(request: Request) -> PDFDocumentInfo:
    """
    Get the page count and document info of a PDF sent as the raw request body
    """
    try:
        data = await read_document_body(request)
        return await pdf_service.get_document_info_async(data)
    except HTTPException:
        raise
    except DocumentLoadFailed as e:
        logger.warning(f"PDF unreadable: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Error getting PDF info: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error getting PDF info: {str(e)}")


@router.post("/pages/{page_num}", response_model=Page)
async def get_pdf_page(page_num: int, request: Request) -> Page:
    """
    Reconstruct the reading-order markup of one page (1-based)
    """
    try:
        data = await read_document_body(request)
        return await pdf_service.render_page_async(data, page_num)
    except HTTPException:
        raise
    except DocumentLoadFailed as e:
        logger.warning(f"PDF unreadable: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except PageOutOfRange as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PageUnreadable as e:
        logger.error(f"Page {page_num} unreadable: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error(f"Error rendering page {page_num}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error rendering page: {str(e)}")
