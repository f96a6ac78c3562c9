from datetime import datetime, timezone

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.version import VERSION
from app.api import admin, cart, checkout, products
from app.core.config import settings
from app.core.errors import ShopError
from app.core.logging import configure_logging
from app.store.store import build_store

logger = structlog.get_logger(__name__)

# Create instrumentator first
instrumentator = Instrumentator()

app = FastAPI(title="Shop API", version=VERSION)
app.state.store = build_store()

# Instrument the app BEFORE adding routes or middleware
instrumentator.instrument(app).expose(
    app,
    include_in_schema=False,
    endpoint=settings.METRICS_ENDPOINT,
    should_gzip=True,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(ShopError)
async def shop_error_handler(request: Request, exc: ShopError):
    logger.info("request_rejected", path=request.url.path, error=exc.message, kind=type(exc).__name__)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    missing, invalid = [], []
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"] if p != "body") or "body"
        if err["type"] == "missing":
            missing.append(field)
        else:
            invalid.append(f"{field}: {err['msg']}")
    if missing:
        message = "Missing required fields: " + ", ".join(missing)
    else:
        message = "Invalid request: " + "; ".join(invalid)
    return JSONResponse(status_code=400, content={"error": message})

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=getattr(exc, "headers", None))

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error", path=request.url.path)
    return JSONResponse(status_code=500, content={"error": str(exc)})

@app.get("/health")
def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")}

@app.get("/v1/_info")
def info():
    return {"service": settings.SERVICE_NAME, "version": VERSION}

@app.on_event("startup")
async def startup_event():
    configure_logging()
    for route in app.routes:
        if hasattr(route, "methods") and hasattr(route, "path"):
            logger.debug("route_registered", methods=sorted(route.methods), path=route.path)
    cfg = app.state.store.config
    logger.info("shop_started", nth_order=cfg.nth_order, discount_percent=cfg.discount_percent)

app.include_router(products.router, prefix="/products", tags=["products"])
app.include_router(cart.router, prefix="/cart", tags=["cart"])
app.include_router(checkout.router, prefix="/checkout", tags=["checkout"])
app.include_router(admin.router, prefix="/admin", tags=["admin"])

def run():
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
