r"""Unit tests for BaseExceptionHandler."""

from __future__ import annotations

import pytest

from aretry.handlers import BaseExceptionHandler


class SuppressAll(BaseExceptionHandler):
    def __call__(self, exc: Exception) -> None:
        pass


def test_base_exception_handler_is_abstract() -> None:
    """Test that BaseExceptionHandler cannot be instantiated."""
    with pytest.raises(TypeError, match=r"abstract"):
        BaseExceptionHandler()


def test_base_exception_handler_subclass_suppresses() -> None:
    """Test that a subclass returning normally suppresses the
    exception."""
    assert SuppressAll()(ValueError("boom")) is None


def test_base_exception_handler_reset_is_noop() -> None:
    """Test that the default reset does nothing."""
    assert SuppressAll().reset() is None
