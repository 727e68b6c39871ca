"""
Assertion helpers for table-driven tests.

Failures are raised as AssertionError so pytest (or unittest) reports
them like any other failed assert.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from testhelpers.serialization import fixtures_to_yaml


ErrorCheck = Callable[..., bool]


def _with_context(message: str, msg: Optional[str]) -> str:
    if msg:
        return f"{message}\n{msg}"
    return message


def error_with_message(expected: str) -> ErrorCheck:
    """
    Build a check that an error was raised with exactly `expected` as message.

    The check is meant to sit in a test table next to the inputs:

        cases = [
            ("", error_with_message("name is empty")),
            ("x" * 300, error_with_message("name is too long")),
        ]

    Args:
        expected: The exact text `str(error)` must produce

    Returns:
        check(actual_error, msg=None) that returns True on success and
        raises AssertionError when the error is missing or its message
        differs. `msg` is appended to the failure message.
    """

    def check(actual_error: Optional[BaseException], msg: Optional[str] = None) -> bool:
        if actual_error is None:
            raise AssertionError(_with_context("An error is expected, got None.", msg))

        actual = str(actual_error)
        if actual != expected:
            raise AssertionError(
                _with_context(
                    f"Error message not equal:\n"
                    f"expected: {expected!r}\n"
                    f"actual  : {actual!r}",
                    msg,
                )
            )
        return True

    return check


def assert_matches_any(actual: Any, candidates: Iterable[Any], msg: Optional[str] = None) -> None:
    """Fail unless `actual` equals at least one of `candidates`."""
    candidates = list(candidates)
    for candidate in candidates:
        if actual == candidate:
            return

    raise AssertionError(
        _with_context(
            f"Value matches none of {len(candidates)} candidates.\n"
            f"actual:\n{fixtures_to_yaml([actual])}"
            f"candidates:\n{fixtures_to_yaml(candidates)}",
            msg,
        )
    )
