import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.app.routes import extract, answer, documents
from backend.app.services.agent_registry import agent_registry
from shared.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting PDF Question Desk env={settings.app_env} store={settings.docs_file}")
    await agent_registry.init()
    yield
    await agent_registry.close()

app = FastAPI(title="PDF Question Desk", lifespan=lifespan)

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # One error shape for every endpoint: {error, details?, success: false}
    body = dict(exc.detail) if isinstance(exc.detail, dict) else {"error": exc.detail}
    body["success"] = False
    return JSONResponse(status_code=exc.status_code, content=body)

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "details": str(exc), "success": False},
    )

app.include_router(extract.router)
app.include_router(answer.router)
app.include_router(documents.router)
