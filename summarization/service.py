"""
FastAPI router for summarization endpoints.

Pipeline Architecture:
1. Text input → Summarization
2. File input → Extraction Service → Summarization
3. URL input → Web Extraction → Summarization

Every source ends in the same call: text in, summary out.
Errors are returned as {"error": message} (see app.py handlers).
"""
import os
import uuid
import tempfile
from typing import Optional

from fastapi import APIRouter, HTTPException, UploadFile, File, Form

from core import validate_required_field, validate_file_extension, validate_url
from logs.logging_config import get_llm_logger, RequestContext
from text_extractor import EXTRACTOR_SUPPORTED_FILE_TYPES, extract_text_from_file
from web_extractor import extract_from_url
from .config import (
    SUMMARIZATION_CHUNK_MAX_CHARS,
    SUMMARIZATION_TOKEN_THRESHOLD,
    SUMMARIZATION_MAX_PASSES,
    SUMMARIZATION_REQUEST_DELAY_MS,
)
from .llm_client import get_backend_info
from .schemas import (
    TextSummarizationRequest,
    UrlSummarizationRequest,
    SummarizationResponse,
    ErrorResponse,
)
from .summarizer import summarize_text

logger = get_llm_logger("service")

router = APIRouter(
    prefix="/api",
    tags=["Summarization"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)


# =====================
# Service Layer Functions
# =====================

async def run_summarization(text: str, context: str) -> SummarizationResponse:
    """Summarize extracted text and wrap the result."""
    logger.info(f"[{context}] Summarizing | chars={len(text)}")
    result = await summarize_text(text)
    logger.info(
        f"[{context}] END | passes={result['passes']} | chunks={result['total_chunks']} | "
        f"failed_chunks={result['failed_chunks']} | stopped={result['stopped_reason']}"
    )
    return SummarizationResponse(summary=result["summary"])


async def call_extraction_service(file: UploadFile, file_ext: str) -> str:
    """
    Save an upload to a temp file, extract its text, and remove the file.

    Returns:
        Extracted plain text
    """
    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(delete=False, suffix=file_ext) as temp_file:
            temp_file.write(await file.read())
            temp_path = temp_file.name

        logger.info(f"[PIPELINE] Calling extraction service | file={file.filename} | temp={temp_path}")
        result = await extract_text_from_file(temp_path)
        logger.info(f"[PIPELINE] Extraction complete | metadata={result.metadata.to_dict()}")
        return result.text

    finally:
        if temp_path and os.path.exists(temp_path):
            try:
                os.unlink(temp_path)
            except OSError as e:
                logger.warning(f"[PIPELINE] Could not remove temp file {temp_path}: {e}")


async def call_web_extraction(url: str) -> str:
    """
    Fetch a URL and return its main text.

    Raises:
        HTTPException(400): If no readable content was found
    """
    logger.info(f"[PIPELINE] Calling web extraction | url={url}")
    article = await extract_from_url(url)
    if article.is_empty:
        raise HTTPException(status_code=400, detail="Failed to extract content from URL")
    return article.text


# =====================
# API Endpoints
# =====================

@router.get("")
async def welcome():
    """Service greeting."""
    return {"message": "WELCOME!"}


@router.post("/summarize", response_model=SummarizationResponse)
async def summarize_text_endpoint(request: TextSummarizationRequest):
    """
    Summarize raw text.

    **Request Body:**
    - `text`: Text to summarize (required)
    - `request_id`: Request ID for tracking (generated if not provided)

    **Returns:**
    - `summary`: Generated summary
    """
    request_id = request.request_id or str(uuid.uuid4())

    with RequestContext(request_id, request.user_id):
        try:
            validate_required_field(request.text, "text", "Summarization")
        except ValueError:
            raise HTTPException(status_code=400, detail="Text is required")

        logger.info(f"[SUMMARIZE_TEXT] START | request_id={request_id} | chars={len(request.text)}")

        try:
            return await run_summarization(request.text, "SUMMARIZE_TEXT")
        except Exception as e:
            logger.error(f"[SUMMARIZE_TEXT] ERROR | request_id={request_id} | error={e}", exc_info=True)
            raise HTTPException(status_code=500, detail="Summarization failed")


@router.post("/summarize-file", response_model=SummarizationResponse)
async def summarize_file_endpoint(
    file: Optional[UploadFile] = File(None, description="File to summarize (PDF, DOCX)"),
    request_id: Optional[str] = Form(None, description="Request ID (generated if not provided)"),
    user_id: Optional[str] = Form(None, description="User identifier for logging")
):
    """
    Summarize an uploaded document: File → Extraction → Summarization

    **Supported File Types:**
    - PDF (.pdf)
    - Word Document (.docx)

    The upload is stored in a temporary file that is always deleted.
    """
    request_id = request_id or str(uuid.uuid4())

    with RequestContext(request_id, user_id):
        if file is None:
            raise HTTPException(status_code=400, detail="File is required")

        try:
            file_ext = validate_file_extension(file.filename, EXTRACTOR_SUPPORTED_FILE_TYPES, "Summarization")
        except ValueError:
            raise HTTPException(status_code=400, detail="Unsupported file type.")

        logger.info(f"[SUMMARIZE_FILE] START | request_id={request_id} | filename={file.filename}")

        try:
            text = await call_extraction_service(file, file_ext)

            if not text.strip():
                raise HTTPException(status_code=400, detail="Could not extract text from the file")

            return await run_summarization(text, "SUMMARIZE_FILE")

        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"[SUMMARIZE_FILE] ERROR | request_id={request_id} | error={e}", exc_info=True)
            raise HTTPException(status_code=500, detail="File processing failed")


@router.post("/summarize-url", response_model=SummarizationResponse)
async def summarize_url_endpoint(request: UrlSummarizationRequest):
    """
    Summarize a web page: URL → Fetch → Main Content → Summarization
    """
    request_id = request.request_id or str(uuid.uuid4())

    with RequestContext(request_id, request.user_id):
        if not (request.url or "").strip():
            raise HTTPException(status_code=400, detail="URL is required")
        try:
            validate_url(request.url, "Summarization")
        except ValueError:
            raise HTTPException(status_code=400, detail="URL must start with http:// or https://")

        logger.info(f"[SUMMARIZE_URL] START | request_id={request_id} | url={request.url}")

        try:
            text = await call_web_extraction(request.url)
            return await run_summarization(text, "SUMMARIZE_URL")

        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"[SUMMARIZE_URL] ERROR | request_id={request_id} | error={e}", exc_info=True)
            raise HTTPException(status_code=500, detail="URL summarization failed")


@router.post("/summarize/any", response_model=SummarizationResponse)
async def summarize_any_endpoint(
    text: Optional[str] = Form(None, description="Raw text"),
    url: Optional[str] = Form(None, description="Web page URL"),
    file: Optional[UploadFile] = File(None, description="PDF or DOCX file"),
    request_id: Optional[str] = Form(None, description="Request ID (generated if not provided)"),
    user_id: Optional[str] = Form(None, description="User identifier for logging")
):
    """
    Summarize whichever input is given, checked in order: file, url, text.
    """
    if file is not None and file.filename:
        return await summarize_file_endpoint(file=file, request_id=request_id, user_id=user_id)
    if url and url.strip():
        return await summarize_url_endpoint(UrlSummarizationRequest(url=url, request_id=request_id, user_id=user_id))
    if text and text.strip():
        return await summarize_text_endpoint(TextSummarizationRequest(text=text, request_id=request_id, user_id=user_id))

    raise HTTPException(status_code=400, detail="One of text, url or file is required")


@router.get("/config")
async def get_default_config():
    """
    Get the summarization configuration (credential excluded).
    """
    return {
        "chunk_max_chars": SUMMARIZATION_CHUNK_MAX_CHARS,
        "token_threshold": SUMMARIZATION_TOKEN_THRESHOLD,
        "max_passes": SUMMARIZATION_MAX_PASSES,
        "request_delay_ms": SUMMARIZATION_REQUEST_DELAY_MS,
        "backend": get_backend_info(),
        "supported_file_types": sorted(EXTRACTOR_SUPPORTED_FILE_TYPES),
        "pipeline": {
            "text_input": "Text → Summarization",
            "file_input": "File → Extraction → Summarization",
            "url_input": "URL → Web Extraction → Summarization"
        }
    }
