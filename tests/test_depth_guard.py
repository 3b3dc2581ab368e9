"""Tests for DepthGuard recursion protection.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

import pytest

from l10ntree.constants import MAX_TREE_DEPTH
from l10ntree.core import DepthGuard, depth_clamp
from l10ntree.diagnostics import TreeDepthExceededError


class TestDepthGuard:
    """Context manager behaviour."""

    def test_defaults(self) -> None:
        """Default limit is MAX_TREE_DEPTH."""
        guard = DepthGuard()
        assert guard.max_depth == MAX_TREE_DEPTH
        assert guard.depth == 0

    def test_tracks_depth(self) -> None:
        """Depth increments on enter and decrements on exit."""
        guard = DepthGuard(max_depth=3)
        with guard:
            with guard:
                assert guard.depth == 2
            assert guard.depth == 1
        assert guard.depth == 0

    def test_limit(self) -> None:
        """Entering beyond the limit raises without changing depth."""
        guard = DepthGuard(max_depth=1)
        with guard:
            with pytest.raises(TreeDepthExceededError):
                guard.__enter__()
            assert guard.depth == 1
        assert guard.depth == 0

    def test_exit_on_error(self) -> None:
        """Depth is restored when the guarded block raises."""
        guard = DepthGuard()
        with pytest.raises(ValueError, match="boom"), guard:
            msg = "boom"
            raise ValueError(msg)
        assert guard.depth == 0


class TestDepthClamp:
    """Clamping against the interpreter recursion limit."""

    def test_small_depth_unchanged(self) -> None:
        """Reasonable depths pass through."""
        assert depth_clamp(10) == 10

    def test_large_depth_clamped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Excessive depths are clamped with a warning."""
        with caplog.at_level(logging.WARNING, logger="l10ntree.core.depth_guard"):
            clamped = depth_clamp(10**6)
        assert clamped == sys.getrecursionlimit() - 50
        assert "Clamping" in caplog.text

    def test_guard_clamps(self) -> None:
        """DepthGuard applies the clamp on construction."""
        assert DepthGuard(max_depth=10**6).max_depth < 10**6
