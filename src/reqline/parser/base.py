"""Data models for parsed reqline statements and executed requests.

The parser turns a statement into a RequestDescriptor; the client turns a
descriptor into a ResponseEnvelope.
"""

from typing import Literal

from pydantic import BaseModel, Field, JsonValue

from reqline.errors import ErrorKind

REQUIRED_KEYWORDS = ("HTTP", "URL")
OPTIONAL_KEYWORDS = ("HEADERS", "QUERY", "BODY")
ALL_KEYWORDS = REQUIRED_KEYWORDS + OPTIONAL_KEYWORDS
VALID_METHODS = ("GET", "POST")

Keyword = Literal["HTTP", "URL", "HEADERS", "QUERY", "BODY"]


class Segment(BaseModel):
    """One pipe-delimited piece of a statement, before cleaning."""

    text: str
    index: int
    total: int

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.total - 1


class ParsedKeywordValue(BaseModel):
    keyword: Keyword
    value: JsonValue  # raw string for HTTP / URL


class RequestDescriptor(BaseModel):
    """A fully validated request, ready to execute."""

    method: Literal["GET", "POST"]
    url: str
    headers: JsonValue = {}
    query: JsonValue = {}
    body: JsonValue = {}
    full_url: str = Field(serialization_alias="fullUrl")


class RequestEcho(BaseModel):
    query: JsonValue
    body: JsonValue
    headers: JsonValue
    full_url: str


class ResponseMetrics(BaseModel):
    http_status: int
    duration: int  # milliseconds
    request_start_timestamp: int  # epoch milliseconds
    request_stop_timestamp: int
    response_data: JsonValue


class ResponseEnvelope(BaseModel):
    request: RequestEcho
    response: ResponseMetrics


class ParseResult(BaseModel):
    """Outcome of a parse that never raises."""

    request: RequestDescriptor | None = None
    error_kind: ErrorKind | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.request is not None
