"""
Main FastAPI Application
"""
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.database import init_db
from app.core.logging import setup_logging
from app.routers import auth
from app.services.errors import OtpError, InvalidArgumentError

logger = logging.getLogger("app.main")

app = FastAPI(title=settings.APP_NAME)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()],
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth.router)


@app.exception_handler(OtpError)
async def otp_error_handler(request: Request, exc: OtpError):
    """Render OTP failures as {success, error, message}"""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Render malformed or mistyped request bodies as invalid-argument"""
    logger.warning(f"[OTP] Rejected request to {request.url.path}: {exc.errors()}")
    error = InvalidArgumentError("Invalid request")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


# Startup event
@app.on_event("startup")
async def startup():
    """Configure logging and create database tables"""
    setup_logging()
    if settings.OTP_DEBUG_MODE:
        logger.warning("[STARTUP] OTP_DEBUG_MODE is on: pending codes are readable without authentication at /api/auth/otp/debug")
    try:
        init_db()
        logger.info("[STARTUP] Database tables created/verified")
    except Exception as e:
        error_str = str(e).lower()
        if "already exists" in error_str or "duplicate" in error_str:
            logger.info("[STARTUP] Tables already exist")
        else:
            logger.error(f"[STARTUP] Database creation error: {e}")
            raise


@app.get("/health")
async def health():
    return {"status": "healthy"}


@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} API", "version": settings.APP_VERSION}
