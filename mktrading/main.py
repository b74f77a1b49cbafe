"""
Main FastAPI Application
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from mktrading.core.config import settings
from mktrading.core.database import SessionLocal, Store, init_db
from mktrading.core.exceptions import AppError, AuthError, ValidationError
from mktrading.api.v1 import auth, parties, challans, hr, expenses, payments, reports
from mktrading.services.user_service import UserService

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def seed_admin_user():
    """Create the configured login user if it does not exist yet"""
    if not (settings.ADMIN_USERNAME and settings.ADMIN_PASSWORD):
        return
    db = SessionLocal()
    try:
        UserService(Store(db)).ensure_user(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info("Starting up...")
    if settings.RUN_MIGRATIONS:
        init_db()
        logger.info("Database schema applied")
    seed_admin_user()

    yield

    # Shutdown
    logger.info("Shutting down...")


# Create app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials="*" not in settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        message = f"Invalid value for {field}: {first.get('msg')}" if field else first.get("msg", message)
    return JSONResponse(status_code=ValidationError.status_code, content={"error": message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred"}
    )


# Health check
@app.get(f"{settings.API_PREFIX}/health")
async def health_check():
    return {"ok": True}


# Include routers
app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(parties.router, prefix=settings.API_PREFIX)
app.include_router(challans.router, prefix=settings.API_PREFIX)
app.include_router(hr.router, prefix=settings.API_PREFIX)
app.include_router(expenses.router, prefix=settings.API_PREFIX)
app.include_router(payments.router, prefix=settings.API_PREFIX)
app.include_router(reports.router, prefix=settings.API_PREFIX)


def run():
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
