from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class ResultType(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SKIPPED = "skipped"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RuleLink(BaseModel):
    target: str
    title: str


class RequestOption(BaseModel):
    value: str
    label: str


class RequestData(BaseModel):
    """A question a rule needs answered before it can reach a verdict."""

    slug: str
    type: Literal["select", "text"] = "select"
    label: str
    description: str = ""
    options: List[RequestOption] = Field(default_factory=list)
    default: str = ""


class ResultMessage(BaseModel):
    message: str
    line: Optional[int] = None
    code: Optional[str] = None


class RuleResult(BaseModel):
    test_slug: str
    test_title: str
    test_description: str = ""
    test_guideline_title: str = ""
    test_guideline_anchor: str = ""
    test_links: List[RuleLink] = Field(default_factory=list)
    check_id: str

    type: ResultType = ResultType.ERROR
    messages: List[ResultMessage] = Field(default_factory=list)
    message_codes: List[str] = Field(default_factory=list)
    request_data: List[RequestData] = Field(default_factory=list)

    def is_done(self) -> bool:
        return not self.request_data and bool(self.messages)


class CheckCompleted(BaseModel):
    """Returned instead of a result once every rule has a persisted result."""

    check_id: str
    message: str = "All tests completed."


class Domain(BaseModel):
    name: str
    options: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=_utcnow)


class Check(BaseModel):
    id: str
    url: Optional[str] = None
    html: str
    title: str
    domain: Optional[str] = None
    options: Dict[str, Any] = Field(default_factory=dict)
    results: List[RuleResult] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)


class ValidatorIssue(BaseModel):
    type: str
    sub_type: Optional[str] = None
    message: str
    extract: str = ""
    last_line: Optional[int] = None


class CheckReport(BaseModel):
    check_id: str
    generated_at: datetime
    complete: bool = False

    results: List[RuleResult] = Field(default_factory=list)
    totals: Dict[ResultType, int] = Field(default_factory=dict)
