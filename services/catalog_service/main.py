import asyncio
import contextlib
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_service import config
from catalog_service.catalog import PRODUCTS
from catalog_service.mcp_tools import mcp
from catalog_service.models import ErrorResponse, HealthResponse, ProductListResponse

logger = logging.getLogger(__name__)


def log_startup(port: int) -> None:
    logger.info("Server running on http://localhost:%d", port)
    logger.info("Products API available at http://localhost:%d/api/products", port)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    log_startup(config.PORT)
    async with mcp.session_manager.run():
        yield


app = FastAPI(title="Product Catalog Service", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount MCP server at /mcp for tool auto-discovery
app.mount("/mcp", mcp.streamable_http_app())


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    body = ErrorResponse(message=str(exc.detail))
    return JSONResponse(body.model_dump(), status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error serving %s %s", request.method, request.url.path)
    body = ErrorResponse(message="Internal server error")
    return JSONResponse(body.model_dump(), status_code=500)


@app.get("/health")
async def health() -> HealthResponse:
    return HealthResponse()


@app.get("/api/products")
async def list_all_products() -> ProductListResponse:
    # Only this request is suspended; other requests keep being served
    await asyncio.sleep(config.PRODUCTS_DELAY_SECONDS)
    return ProductListResponse(data=list(PRODUCTS))
