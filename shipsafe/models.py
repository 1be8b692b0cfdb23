# shipsafe/models.py
from pydantic import BaseModel, Field
from typing import Any, List, Literal, Optional

CheckStatus = Literal["pass", "fail", "warn"]


class ScanHeadersRequest(BaseModel):
    url: Any = None


class HeaderCheckResult(BaseModel):
    name: str
    header: str
    status: CheckStatus
    message: str


class ScanSummary(BaseModel):
    passed: int = 0
    failed: int = 0
    warnings: int = 0
    total: int = 0


class ScanReport(BaseModel):
    url: str
    timestamp: str
    results: List[HeaderCheckResult] = Field(default_factory=list)
    summary: ScanSummary


class WaitlistSignup(BaseModel):
    email: Optional[str] = None
    url: Optional[str] = None


class WaitlistResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
