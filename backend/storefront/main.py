from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from storefront.core.config import settings
from storefront.core.errors import StoreError
from storefront.core.store import create_store
from storefront.api.routes import admin, cart, checkout, discount_codes, orders, products
from storefront.schemas.common import ERROR_RESPONSES

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# Startup and shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the in-memory store on startup."""
    logger.info(f"Starting up {settings.PROJECT_NAME} backend ({settings.ENVIRONMENT})...")
    app.state.store = create_store()
    logger.info(f"{settings.PROJECT_NAME} backend started successfully")
    yield
    logger.info(f"Shutting down {settings.PROJECT_NAME} backend...")


# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title=settings.PROJECT_NAME,
    description="Storefront backend: catalog, carts, checkout and loyalty discount codes",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error envelopes
@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request",
            "code": "INVALID_INPUT",
            "details": {"errors": jsonable_encoder(exc.errors())}
        }
    )


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "storefront-backend",
        "version": "1.0.0"
    }


# Include routers
app.include_router(products.router, prefix=f"{settings.API_V1_PREFIX}/products", tags=["Products"], responses=ERROR_RESPONSES)
app.include_router(cart.router, prefix=f"{settings.API_V1_PREFIX}/cart", tags=["Cart"], responses=ERROR_RESPONSES)
app.include_router(checkout.router, prefix=f"{settings.API_V1_PREFIX}/checkout", tags=["Checkout"], responses=ERROR_RESPONSES)
app.include_router(discount_codes.router, prefix=f"{settings.API_V1_PREFIX}/discount-codes", tags=["Discount Codes"], responses=ERROR_RESPONSES)
app.include_router(orders.router, prefix=f"{settings.API_V1_PREFIX}/orders", tags=["Orders"], responses=ERROR_RESPONSES)
app.include_router(admin.router, prefix=f"{settings.API_V1_PREFIX}/admin", tags=["Admin"], responses=ERROR_RESPONSES)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
