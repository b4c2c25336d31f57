import pytest

from reqline.errors import ErrorKind, SpacingError
from reqline.parser.base import Segment
from reqline.parser.sections import clean_sections, split_sections, validate_spacing


class TestSplitSections:
    def test_split_on_pipe(self):
        segments = split_sections("HTTP GET | URL http://x.test")
        assert [s.text for s in segments] == ["HTTP GET ", " URL http://x.test"]
        assert [s.index for s in segments] == [0, 1]
        assert all(s.total == 2 for s in segments)

    def test_single_segment(self):
        segments = split_sections("HTTP GET")
        assert len(segments) == 1
        assert segments[0].is_last

    def test_drops_empty_segments(self):
        segments = split_sections("HTTP GET || URL http://x.test|")
        assert [s.text for s in segments] == ["HTTP GET ", " URL http://x.test"]

    def test_leading_pipe_dropped(self):
        segments = split_sections("|HTTP GET")
        assert [s.text for s in segments] == ["HTTP GET"]

    def test_only_pipes(self):
        assert split_sections("|||") == []


class TestValidateSpacing:
    def test_first_segment_trimmed(self):
        assert validate_spacing(Segment(text="HTTP GET ", index=0, total=2)) == "HTTP GET"

    def test_first_segment_leading_space(self):
        with pytest.raises(SpacingError) as exc:
            validate_spacing(Segment(text=" HTTP GET ", index=0, total=2))
        assert exc.value.kind == ErrorKind.INVALID_PIPE_DEL_SPACING

    def test_missing_trailing_space(self):
        with pytest.raises(SpacingError) as exc:
            validate_spacing(Segment(text="HTTP GET", index=0, total=2))
        assert exc.value.kind == ErrorKind.INVALID_PIPE_DEL_SPACING

    def test_double_trailing_space(self):
        with pytest.raises(SpacingError) as exc:
            validate_spacing(Segment(text="HTTP GET  ", index=0, total=2))
        assert exc.value.kind == ErrorKind.MULTIPLE_SPACES_FOUND

    def test_missing_leading_space(self):
        with pytest.raises(SpacingError) as exc:
            validate_spacing(Segment(text="URL http://x.test", index=1, total=2))
        assert exc.value.kind == ErrorKind.INVALID_PIPE_DEL_SPACING

    def test_double_leading_space(self):
        with pytest.raises(SpacingError) as exc:
            validate_spacing(Segment(text="  URL http://x.test", index=1, total=2))
        assert exc.value.kind == ErrorKind.MULTIPLE_SPACES_FOUND

    def test_last_segment_trailing_spaces_allowed(self):
        assert validate_spacing(Segment(text=" URL http://x.test  ", index=1, total=2)) == "URL http://x.test"

    def test_middle_segment(self):
        assert validate_spacing(Segment(text=" URL http://x.test ", index=1, total=3)) == "URL http://x.test"


class TestCleanSections:
    def test_first_violation_wins(self):
        segments = split_sections("HTTP GET| URL  http://x.test")
        with pytest.raises(SpacingError) as exc:
            clean_sections(segments)
        assert exc.value.kind == ErrorKind.INVALID_PIPE_DEL_SPACING

    def test_all_clean(self):
        segments = split_sections('HTTP POST | URL http://x.test | BODY {"a": 1}')
        assert clean_sections(segments) == ["HTTP POST", "URL http://x.test", 'BODY {"a": 1}']
