"""Unit tests for domain value types."""

import pytest
from pydantic import ValidationError

from showcase.domain.value import (
    SubmissionTitle,
    is_valid_submission_id,
    submission_id_from_url,
)


class TestSubmissionIdFromUrl:
    """Tests for submission_id_from_url."""

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://codepen.io/team/codepen/pen/KKPQLmJ", "KKPQLmJ"),
            ("https://codepen.io/alice/pen/abc-123/", "abc-123"),
            ("http://example.com/showcase/my_entry?tab=result", "my_entry"),
        ],
    )
    def test_takes_last_path_segment(self, url, expected):
        assert submission_id_from_url(url) == expected

    @pytest.mark.parametrize(
        "url",
        [
            "codepen.io/alice/pen/abc",  # No scheme
            "ftp://codepen.io/alice/pen/abc",
            "https://codepen.io/",
            "https://codepen.io/alice/pen/not%20valid",
        ],
    )
    def test_rejects_unusable_urls(self, url):
        with pytest.raises(ValueError):
            submission_id_from_url(url)


class TestSubmissionIdPattern:
    @pytest.mark.parametrize("value", ["a", "KKPQLmJ", "abc_DEF-123", "x" * 64])
    def test_accepts_valid(self, value):
        assert is_valid_submission_id(value)

    @pytest.mark.parametrize("value", ["", "has space", "slash/y", "x" * 65, "dot.ted"])
    def test_rejects_invalid(self, value):
        assert not is_valid_submission_id(value)


class TestSubmissionTitle:
    def test_strips_whitespace(self):
        assert SubmissionTitle("  Neon grid  ").root == "Neon grid"

    def test_max_length_accepted(self):
        assert len(SubmissionTitle("t" * 200).root) == 200

    @pytest.mark.parametrize("title", ["", "   ", "t" * 201])
    def test_rejects_out_of_range(self, title):
        with pytest.raises(ValidationError, match="1-200"):
            SubmissionTitle(title)
