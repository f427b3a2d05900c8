"""
Value -> enabled coercion.
"""

from __future__ import annotations
import math
import pytest

from service.coercion import coerce


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (False, False),
        (0, False),
        (0.0, False),
        (-5, True),
        (50, True),
        (0.25, True),
        (math.nan, True),
        ("true", True),
        ("TRUE", True),
        ("True", True),
        ("1", True),
        ("v2", False),
        ("", False),
        ("yes", False),
        ("0", False),
        (" true", False),
        ({}, False),
        ({"enabled": True}, False),
        ([1], False),
        (None, False),
    ],
)
def test_coerce(value, expected):
    assert coerce(value) is expected
