"""Test utilities for applications using qs2cookie.

Provides an ASGI test client and cookie assertions::

    from qs2cookie.testing import TestClient, assert_set_cookie
"""

from qs2cookie.testing.assertions import (
    assert_diagnostic,
    assert_no_set_cookie,
    assert_set_cookie,
)
from qs2cookie.testing.client import TestClient, TestResponse

__all__ = [
    "TestClient",
    "TestResponse",
    "assert_diagnostic",
    "assert_no_set_cookie",
    "assert_set_cookie",
]
