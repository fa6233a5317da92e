"""
Email verification endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.config import settings
from app.services.errors import NotFoundError, PermissionDeniedError
from app.services.otp import OtpService, build_otp_service, get_debug_code

router = APIRouter(prefix="/api/auth", tags=["auth"])


class OtpRequestBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None
    university_id: Optional[str] = Field(default=None, alias="universityId")


class OtpVerifyBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None
    otp: Optional[str] = Field(default=None, alias="code")


def get_otp_service(db: Session = Depends(get_db)) -> OtpService:
    return build_otp_service(db)


def _require_otp_enabled():
    if not settings.FEATURE_OTP_ENABLED:
        raise PermissionDeniedError("OTP is disabled")


@router.post("/otp/request")
def request_otp(body: OtpRequestBody, service: OtpService = Depends(get_otp_service)):
    """
    Send a verification code to a university email address
    """
    _require_otp_enabled()
    result = service.request_challenge(body.email, body.university_id)
    return {"success": result["success"], "message": result["message"], "debug": result["debug"]}


@router.post("/otp/verify")
def verify_otp(body: OtpVerifyBody, service: OtpService = Depends(get_otp_service)):
    """
    Verify the code sent to the email address
    """
    _require_otp_enabled()
    return service.verify_challenge(body.email, body.otp)


@router.get("/otp/debug")
def read_debug_otp(email: str, db: Session = Depends(get_db)):
    """
    Pending code for email (debug mode only)

    Unauthenticated: anyone who can reach the API can read any pending code
    while OTP_DEBUG_MODE is on. Never enable it in a shared environment.
    """
    if not settings.OTP_DEBUG_MODE:
        raise NotFoundError("Not found")
    code = get_debug_code(db, email)
    if code is None:
        raise NotFoundError("No debug OTP for this email")
    return {"email": email.strip().lower(), "otp": code}
