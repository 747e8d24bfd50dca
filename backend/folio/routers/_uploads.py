from fastapi import HTTPException, Request

from ..config import MAX_UPLOAD_BYTES


def _too_large() -> HTTPException:
    return HTTPException(
        status_code=413,
        detail=f"Document exceeds the {MAX_UPLOAD_BYTES} byte upload limit",
    )


async def read_document_body(request: Request) -> bytes:
    """
    Read the raw request body holding the document bytes.

    Raises:
        HTTPException: 400 if the body is empty, 413 if it exceeds the upload limit.
            A declared Content-Length over the limit is rejected before the
            body is read.
    """
    declared_length = request.headers.get("content-length")
    if declared_length and declared_length.isdigit() and int(declared_length) > MAX_UPLOAD_BYTES:
        raise _too_large()

    data = await request.body()
    if not data:
        raise HTTPException(status_code=400, detail="Request body is empty")
    if len(data) > MAX_UPLOAD_BYTES:
        raise _too_large()
    return data
