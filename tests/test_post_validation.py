# tests/test_post_validation.py
"""Tests for the shared post contents rules."""

import pytest

from curtain_call.services.post_validation import (
    EMPTY_CONTENTS_MESSAGE,
    too_long_message,
    validate_contents,
)

TOO_LONG = "感想は200字以内で入力してください"


def test_empty_contents_rejected() -> None:
    assert validate_contents("") == [EMPTY_CONTENTS_MESSAGE]
    assert EMPTY_CONTENTS_MESSAGE == "感想を入力してください"


@pytest.mark.parametrize("contents", ["a", "最高の舞台でした", "x" * 200, "劇" * 200])
def test_contents_within_limit_accepted(contents: str) -> None:
    assert validate_contents(contents) == []


@pytest.mark.parametrize("contents", ["x" * 201, "劇" * 201])
def test_contents_over_limit_rejected(contents: str) -> None:
    assert validate_contents(contents) == [TOO_LONG]


def test_limit_counts_characters_not_bytes() -> None:
    """200 three-byte characters are 600 bytes but still within the limit."""
    contents = "あ" * 200
    assert len(contents.encode("utf-8")) == 600
    assert validate_contents(contents) == []


def test_whitespace_only_is_not_empty() -> None:
    assert validate_contents("   ") == []


def test_custom_limit_appears_in_message() -> None:
    assert validate_contents("abcd", max_length=3) == [too_long_message(3)]
    assert too_long_message(3) == "感想は3字以内で入力してください"
