"""Splitting a statement into segments and checking the spacing around pipes."""

from reqline.errors import ErrorKind, SpacingError
from reqline.parser.base import Segment

PIPE = "|"


def split_sections(statement: str) -> list[Segment]:
    """Split a statement on pipes, dropping empty pieces."""
    pieces = [p for p in statement.split(PIPE) if p]
    return [Segment(text=p, index=i, total=len(pieces)) for i, p in enumerate(pieces)]


def validate_spacing(segment: Segment) -> str:
    """Check the spacing next to the pipes of one segment and return it trimmed."""
    text = segment.text

    if segment.is_first:
        if text.startswith(" "):
            raise SpacingError(ErrorKind.INVALID_PIPE_DEL_SPACING)
    else:
        if not text.startswith(" "):
            raise SpacingError(ErrorKind.INVALID_PIPE_DEL_SPACING)
        if text.startswith("  "):
            raise SpacingError(ErrorKind.MULTIPLE_SPACES_FOUND)

    if not segment.is_last:
        if not text.endswith(" "):
            raise SpacingError(ErrorKind.INVALID_PIPE_DEL_SPACING)
        if text.endswith("  "):
            raise SpacingError(ErrorKind.MULTIPLE_SPACES_FOUND)

    return text.strip()


def clean_sections(segments: list[Segment]) -> list[str]:
    return [validate_spacing(s) for s in segments]
