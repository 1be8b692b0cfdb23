# shipsafe/router.py
import logging

from fastapi import APIRouter, BackgroundTasks
from fastapi.responses import JSONResponse

from .errors import InternalError, ShipSafeError
from .models import ErrorResponse, ScanHeadersRequest, ScanReport, WaitlistResponse, WaitlistSignup
from .scans import security_headers
from . import waitlist

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])

_error_responses = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _error(exc: ShipSafeError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@router.post("/scan-headers", response_model=ScanReport, responses=_error_responses)
async def scan_headers(request: ScanHeadersRequest):
    try:
        return await security_headers.scan(request.url)
    except ShipSafeError as e:
        return _error(e)
    except Exception as e:
        logger.exception("Scan error: %s", e)
        return _error(InternalError("Failed to scan the target"))


@router.post("/waitlist", response_model=WaitlistResponse, responses=_error_responses)
async def join_waitlist(signup: WaitlistSignup, background_tasks: BackgroundTasks):
    try:
        signup.email = waitlist.validate_email(signup.email)
        background_tasks.add_task(waitlist.process_signup, signup)
        return {"success": True}
    except ShipSafeError as e:
        return _error(e)
    except Exception as e:
        logger.exception("Waitlist error: %s", e)
        return _error(InternalError("Failed to save signup"))
