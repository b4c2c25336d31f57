"""Error catalog and exception types for reqline.

Every failure carries an ErrorKind so callers can branch on the kind
instead of matching message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_PIPE_DEL_SPACING = "INVALID_PIPE_DEL_SPACING"
    MULTIPLE_SPACES_FOUND = "MULTIPLE_SPACES_FOUND"
    MISSING_HTTP = "MISSING_HTTP"
    MISSING_URL = "MISSING_URL"
    MISSING_SPACE_AFTER_KEYWORD = "MISSING_SPACE_AFTER_KEYWORD"
    KEYWORDS_MUST_BE_UPPERCASE = "KEYWORDS_MUST_BE_UPPERCASE"
    METHOD_MUST_BE_UPPERCASE = "METHOD_MUST_BE_UPPERCASE"
    INVALID_HTTP_METHOD = "INVALID_HTTP_METHOD"
    UNKNOWN_KEYWORD = "UNKNOWN_KEYWORD"
    INVALID_JSON = "INVALID_JSON"
    INVALID_STATEMENT = "INVALID_STATEMENT"
    MALFORMED_QUERY = "MALFORMED_QUERY"
    EXECUTION_FAILED = "EXECUTION_FAILED"


MESSAGES = {
    ErrorKind.INVALID_PIPE_DEL_SPACING: "Invalid spacing around pipe delimiter",
    ErrorKind.MULTIPLE_SPACES_FOUND: "Multiple spaces found where single space expected",
    ErrorKind.MISSING_HTTP: "Missing required HTTP keyword",
    ErrorKind.MISSING_URL: "Missing required URL keyword",
    ErrorKind.MISSING_SPACE_AFTER_KEYWORD: "Missing space after keyword",
    ErrorKind.KEYWORDS_MUST_BE_UPPERCASE: "Keywords must be uppercase",
    ErrorKind.METHOD_MUST_BE_UPPERCASE: "HTTP method must be uppercase",
    ErrorKind.INVALID_HTTP_METHOD: "Invalid HTTP method. Only GET and POST are supported",
    ErrorKind.INVALID_STATEMENT: "Invalid reqline statement",
    ErrorKind.MALFORMED_QUERY: "URI malformed",
}


class ReqlineError(Exception):
    """Base class for every reqline failure."""

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message or MESSAGES.get(kind, kind.value)
        super().__init__(self.message)


class ReqlineParseError(ReqlineError):
    """Raised while turning a statement into a request descriptor."""


class SpacingError(ReqlineParseError):
    pass


class CaseError(ReqlineParseError):
    pass


class MissingSpaceError(ReqlineParseError):
    def __init__(self):
        super().__init__(ErrorKind.MISSING_SPACE_AFTER_KEYWORD)


class UnknownKeywordError(ReqlineParseError):
    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(ErrorKind.UNKNOWN_KEYWORD, f"Unknown keyword: {keyword}")


class MissingRequiredKeywordError(ReqlineParseError):
    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(ErrorKind(f"MISSING_{keyword}"))


class InvalidMethodError(ReqlineParseError):
    def __init__(self):
        super().__init__(ErrorKind.INVALID_HTTP_METHOD)


class InvalidJsonError(ReqlineParseError):
    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(ErrorKind.INVALID_JSON, f"Invalid JSON format in {keyword} section")


class InvalidStatementError(ReqlineParseError):
    def __init__(self):
        super().__init__(ErrorKind.INVALID_STATEMENT)


class MalformedQueryError(ReqlineParseError):
    """A QUERY key or value cannot be percent-encoded."""

    def __init__(self):
        super().__init__(ErrorKind.MALFORMED_QUERY)


class ExecutionError(ReqlineError):
    """The transport failed after a descriptor was built."""

    def __init__(self, message: str, status: int | None = None, response_data=None):
        self.status = status
        self.response_data = response_data
        super().__init__(ErrorKind.EXECUTION_FAILED, message)
