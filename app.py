"""
Summarizer Service

FastAPI application wiring the summarization router, error handlers,
logging, and shutdown of the shared HTTP session.

Run:
    uvicorn app:app --port 3000
    summarizer-service
"""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import SERVICE_NAME, SERVICE_HOST, SERVICE_PORT, CORS_ALLOW_ORIGINS
from logs.logging_config import setup_llm_logging, get_llm_logger
from summarization import router as summarization_router
from summarization.llm_client import close_session

setup_llm_logging()
logger = get_llm_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"[APP] {SERVICE_NAME} starting | port={SERVICE_PORT}")
    yield
    await close_session()
    logger.info(f"[APP] {SERVICE_NAME} stopped")


app = FastAPI(title="Summarizer Service", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Return every HTTP error as {"error": message}."""
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors (400), not 422."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.warning(f"[APP] Validation error | path={request.url.path} | {message}")
    return JSONResponse(status_code=400, content={"error": message})


app.include_router(summarization_router)


@app.get("/health")
async def health():
    return {"status": "ok"}


def main():
    """Run the service with uvicorn on SERVICE_PORT."""
    uvicorn.run(app, host=SERVICE_HOST, port=SERVICE_PORT)


if __name__ == "__main__":
    main()
