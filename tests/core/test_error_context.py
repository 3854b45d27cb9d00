# SPDX-License-Identifier: Apache-2.0
"""
Core: error context attachment.
"""

from vikingdb_sdk.core.error_context import attach_context, get_context, has_context


def test_attach_context_sets_canonical_and_component_attributes():
    exc = RuntimeError("boom")
    attach_context(exc, "vector_transport", path="/x", attempts=2)

    ctx = get_context(exc)
    assert ctx["component"] == "vector_transport"
    assert ctx["path"] == "/x"
    assert ctx["attempts"] == 2
    assert get_context(exc, component="vector_transport") == ctx
    assert has_context(exc)


def test_attach_context_merges_repeated_calls():
    exc = ValueError("bad")
    attach_context(exc, "first", a=1)
    attach_context(exc, "second", b=2)

    ctx = get_context(exc)
    assert ctx["component"] == "first"
    assert ctx["a"] == 1
    assert ctx["b"] == 2


def test_get_context_defaults_to_empty():
    exc = KeyError("k")
    assert get_context(exc) == {}
    assert not has_context(exc)
