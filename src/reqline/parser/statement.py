"""Statement-level parsing: aggregates sections and builds the request descriptor."""

import logging

from pydantic import JsonValue

from reqline.errors import (
    InvalidStatementError,
    MalformedQueryError,
    MissingRequiredKeywordError,
    ReqlineError,
)
from reqline.parser.base import REQUIRED_KEYWORDS, ParsedKeywordValue, ParseResult, RequestDescriptor
from reqline.parser.jsonvalue import encode_component, json_item, json_keys, stringify
from reqline.parser.keywords import parse_section
from reqline.parser.sections import clean_sections, split_sections

logger = logging.getLogger(__name__)


def parse_reqline(statement: str) -> RequestDescriptor:
    """Parse a reqline statement into a RequestDescriptor.

    Raises a ReqlineParseError subclass on the first problem found.
    """
    if not statement or not isinstance(statement, str):
        raise InvalidStatementError()

    segments = split_sections(statement)
    parsed = [parse_section(s) for s in clean_sections(segments)]
    sections = aggregate_sections(parsed)
    request = build_request(sections)
    logger.debug("Parsed reqline: %s %s", request.method, request.full_url)
    return request


def try_parse_reqline(statement: str) -> ParseResult:
    """Like parse_reqline, but reports failures in the result instead of raising."""
    try:
        return ParseResult(request=parse_reqline(statement))
    except ReqlineError as e:
        return ParseResult(error_kind=e.kind, error_message=e.message)


def aggregate_sections(parsed: list[ParsedKeywordValue]) -> dict[str, JsonValue]:
    """Fold parsed sections into a keyword map; repeated keywords keep the last value."""
    sections: dict[str, JsonValue] = {}
    for item in parsed:
        sections[item.keyword] = item.value

    for keyword in REQUIRED_KEYWORDS:
        if keyword not in sections:
            raise MissingRequiredKeywordError(keyword)
    return sections


# JSON values a JavaScript `||` treats as missing. Empty lists and objects
# are truthy there, so they are kept.
_FALSY_VALUES = (None, False, 0, "")


def build_request(sections: dict[str, JsonValue]) -> RequestDescriptor:
    url = sections["URL"]
    query = _section_or_empty(sections, "QUERY")

    return RequestDescriptor(
        method=sections["HTTP"],
        url=url,
        headers=_section_or_empty(sections, "HEADERS"),
        query=query,
        body=_section_or_empty(sections, "BODY"),
        full_url=build_full_url(url, query),
    )


def _section_or_empty(sections: dict[str, JsonValue], keyword: str) -> JsonValue:
    value = sections.get(keyword)
    if value in _FALSY_VALUES:
        return {}
    return value


def build_full_url(url: str, query: JsonValue) -> str:
    keys = json_keys(query)
    if not keys:
        return url
    try:
        pairs = [
            f"{encode_component(key)}={encode_component(stringify(json_item(query, key)))}"
            for key in keys
        ]
    except UnicodeEncodeError as e:
        raise MalformedQueryError() from e
    return f"{url}?{'&'.join(pairs)}"
