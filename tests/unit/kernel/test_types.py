"""Unit tests for the Lookup type."""

from __future__ import annotations

import pytest

from mp_flags.kernel.types import Errored, Found, NotFound


class TestFound:
    def test_value(self) -> None:
        found = Found("true")
        assert found.value == "true"
        assert found.unwrap() == "true"
        assert found.unwrap_or("x") == "true"
        assert found.is_found() and not found.is_errored()

    def test_equality(self) -> None:
        assert Found("a") == Found("a")
        assert Found("a") != Found("b")
        assert Found("a") != NotFound()

    def test_repr(self) -> None:
        assert repr(Found("a")) == "Found('a')"


class TestNotFound:
    def test_flags(self) -> None:
        nf = NotFound()
        assert not nf.is_found()
        assert not nf.is_errored()
        assert nf.unwrap_or("fallback") == "fallback"

    def test_unwrap_raises(self) -> None:
        with pytest.raises(LookupError):
            NotFound().unwrap()

    def test_all_not_found_equal(self) -> None:
        assert NotFound() == NotFound()


class TestErrored:
    def test_keeps_cause(self) -> None:
        cause = OSError("down")
        err = Errored(cause)
        assert err.cause is cause
        assert err.is_errored()
        assert not err.is_found()
        assert err.unwrap_or("fallback") == "fallback"

    def test_unwrap_reraises(self) -> None:
        with pytest.raises(OSError):
            Errored(OSError("down")).unwrap()
