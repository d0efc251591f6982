"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, Field, StrictStr

NonEmptyString = Annotated[StrictStr, Field(min_length=1, frozen=True)]


def _check_path_segment(value: str) -> str:
    if "/" in value or "\\" in value:
        raise ValueError("must not contain path separators")
    if value in (".", ".."):
        raise ValueError("must not be a relative directory reference")
    return value


# A string used verbatim as one directory name (e.g., an application name)
PathSegment = Annotated[NonEmptyString, AfterValidator(_check_path_segment)]

__all__ = [
    "NonEmptyString",
    "PathSegment",
]
