"""Rules shared by creating and updating a post."""

from __future__ import annotations

from curtain_call.core.settings import settings

EMPTY_CONTENTS_MESSAGE = "感想を入力してください"


def too_long_message(max_length: int) -> str:
    return f"感想は{max_length}字以内で入力してください"


def validate_contents(contents: str, max_length: int | None = None) -> list[str]:
    """Return the error messages for ``contents``; an empty list means valid.

    ``len`` on ``str`` counts characters, not encoded bytes, so a 200-character
    Japanese impression is accepted.
    """
    limit = settings.post_contents_max_length if max_length is None else max_length
    errors: list[str] = []
    if len(contents) == 0:
        errors.append(EMPTY_CONTENTS_MESSAGE)
    elif len(contents) > limit:
        errors.append(too_long_message(limit))
    return errors
