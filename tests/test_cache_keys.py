"""
tests.test_cache_keys

Unit tests for principal key derivation and cache key formatting.
"""

from __future__ import annotations

import pytest

from todo_gateway.cache.keys import UNKNOWN_PRINCIPAL, derive_principal_key, todos_cache_key


def test_payload_segment_is_truncated_to_ten_chars() -> None:
    assert derive_principal_key("Bearer aaa.bbbbbbbbbbbbbbbbbbbb.ccc") == "bbbbbbbbbb"


def test_short_payload_segment_is_kept_whole() -> None:
    assert derive_principal_key("Bearer h.abc.s") == "abc"


@pytest.mark.parametrize("header", [None, ""])
def test_missing_credential_maps_to_sentinel(header: str | None) -> None:
    assert derive_principal_key(header) == UNKNOWN_PRINCIPAL == "unknown"


@pytest.mark.parametrize(
    "header",
    [
        "Bearer ",
        "Bearer opaque-token-without-dots",
        "Bearer onlyheader.",
        "Bearer a..c",
        "Basic dXNlcjpwYXNz",
    ],
)
def test_malformed_credentials_fall_back_to_sentinel(header: str) -> None:
    assert derive_principal_key(header) == UNKNOWN_PRINCIPAL


def test_two_segments_are_enough() -> None:
    assert derive_principal_key("Bearer head.payload0123456789") == "payload012"


def test_prefix_match_is_case_sensitive() -> None:
    # "bearer " is not stripped, so segment 0 is "bearer x"; segment 1 is still sliced.
    assert derive_principal_key("bearer x.yyyyyyyyyyyy.z") == "yyyyyyyyyy"


def test_header_without_scheme_is_sliced_directly() -> None:
    assert derive_principal_key("h.p1234567890.s") == "p123456789"


def test_todos_cache_key_format() -> None:
    assert todos_cache_key("bbbbbbbbbb") == "todos:user:bbbbbbbbbb"
