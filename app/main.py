import logging
import time

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import settings
from app.core.monitoring import monitoring
from app.api.routes_admin import router as admin_router
from app.api.routes_auth import router as auth_router
from app.api.routes_cart import router as cart_router
from app.api.routes_complaint import router as complaint_router
from app.api.routes_order import router as order_router
from app.api.routes_product import router as product_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="electronics-store-api",
    description="Catalog, cart, checkout, complaints and admin dashboard for the electronics storefront",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def record_metrics(request: Request, call_next):
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception:
        # Unhandled errors are turned into a 500 further out; count them here
        monitoring.record_request(500, (time.time() - start_time) * 1000)
        raise
    monitoring.record_request(response.status_code, (time.time() - start_time) * 1000)
    return response


# Body/path validation failures are client errors: 400 with field-level detail
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    monitoring.record_error(str(exc), request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# Register endpoints
app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
app.include_router(product_router, prefix="/api", tags=["Product"])
app.include_router(cart_router, prefix="/api/cart", tags=["Cart"])
app.include_router(order_router, prefix="/api", tags=["Order"])
app.include_router(complaint_router, prefix="/api/complaints", tags=["Complaint"])
app.include_router(admin_router, prefix="/api/admin", tags=["Admin"])


@app.get("/api/health", tags=["Health"])
def get_system_health():
    return monitoring.get_health_status()


# Complaint attachments
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")
