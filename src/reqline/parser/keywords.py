"""Section parser: splits a clean segment into keyword and value.

Checks run in a fixed order so that the first problem in a segment is the
one reported:

1. a space must separate keyword and value
2. known keywords must be uppercase, unknown keywords are rejected
3. exactly one space after the keyword
4. keyword-specific value checks (HTTP method, JSON for optional sections)
"""

from reqline.errors import (
    CaseError,
    ErrorKind,
    InvalidJsonError,
    InvalidMethodError,
    MissingSpaceError,
    SpacingError,
    UnknownKeywordError,
)
from reqline.parser.base import ALL_KEYWORDS, OPTIONAL_KEYWORDS, VALID_METHODS, ParsedKeywordValue
from reqline.parser.jsonvalue import parse_json_value


def parse_section(section: str) -> ParsedKeywordValue:
    """Parse one trimmed segment such as ``HTTP GET`` or ``QUERY {"a": 1}``."""
    space_index = section.find(" ")
    if space_index == -1:
        raise MissingSpaceError()

    keyword = section[:space_index]
    value = section[space_index + 1:]

    _check_keyword(keyword)

    if value.startswith(" "):
        raise SpacingError(ErrorKind.MULTIPLE_SPACES_FOUND)

    if keyword == "HTTP":
        _check_method(value)
    elif keyword in OPTIONAL_KEYWORDS:
        try:
            parsed = parse_json_value(value)
        except ValueError as e:
            raise InvalidJsonError(keyword) from e
        return ParsedKeywordValue(keyword=keyword, value=parsed)

    return ParsedKeywordValue(keyword=keyword, value=value)


def _check_keyword(keyword: str) -> None:
    if keyword != keyword.upper() and keyword.upper() in ALL_KEYWORDS:
        raise CaseError(ErrorKind.KEYWORDS_MUST_BE_UPPERCASE)
    if keyword not in ALL_KEYWORDS:
        raise UnknownKeywordError(keyword)


def _check_method(method: str) -> None:
    if method in VALID_METHODS:
        return
    if method.upper() in VALID_METHODS:
        raise CaseError(ErrorKind.METHOD_MUST_BE_UPPERCASE)
    raise InvalidMethodError()
