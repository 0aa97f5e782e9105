# tests/test_schemas.py
"""Tests for form parsing and view schemas."""

import pytest
from pydantic import ValidationError

from curtain_call.schemas.post import PostForm, PostResponse


def test_post_form_reads_fields() -> None:
    form = PostForm.from_form({"performance": "3", "contents": "よかった", "_token": "t"})
    assert form.performance == 3
    assert form.contents == "よかった"
    assert form.token == "t"


def test_post_form_defaults_for_missing_fields() -> None:
    form = PostForm.from_form({})
    assert form.performance is None
    assert form.contents == ""
    assert form.token is None


@pytest.mark.parametrize("value", ["", "0"])
def test_post_form_blank_performance_is_missing(value: str) -> None:
    assert PostForm.from_form({"performance": value}).performance is None


def test_post_form_rejects_non_numeric_performance() -> None:
    with pytest.raises(ValidationError):
        PostForm.from_form({"performance": "hamlet"})


def test_post_response_flattens_relations(db_session, test_post, test_user) -> None:
    response = PostResponse.model_validate(test_post)
    assert response.user_name == test_user.name
    assert response.performance_title == "Hamlet"
    assert response.contents == "Moving staging."


@pytest.mark.parametrize("value", ["-1", "99999999999999999999"])
def test_post_form_rejects_out_of_range_performance(value: str) -> None:
    with pytest.raises(ValidationError):
        PostForm.from_form({"performance": value})
