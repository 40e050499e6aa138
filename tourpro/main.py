import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from tourpro.config import settings
from tourpro.database import create_tables
from tourpro.exception_handler import setup_exception_handlers
from tourpro.logging_config import configure_logging
from tourpro.auth import router as auth_router
from tourpro.tours import router as tours_router
from tourpro.bookings import router as bookings_router
from tourpro.reports import router as reports_router
from tourpro.admin import router as admin_router

configure_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    logger.info(f"{settings.PROJECT_NAME} started ({settings.ENVIRONMENT})")
    yield

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Tour package booking and management API",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

# Include routers
app.include_router(
    auth_router.router,
    prefix=f"{settings.API_PREFIX}/auth",
    tags=["Authentication"]
)

app.include_router(
    tours_router,
    prefix=f"{settings.API_PREFIX}/tours",
    tags=["Tours"]
)

app.include_router(
    bookings_router,
    prefix=f"{settings.API_PREFIX}/bookings",
    tags=["Bookings"]
)

app.include_router(
    reports_router,
    prefix=f"{settings.API_PREFIX}/reports",
    tags=["Reports"]
)

app.include_router(
    admin_router.router,
    prefix=settings.API_PREFIX,
    tags=["Admin System"]
)

@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": settings.PROJECT_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
