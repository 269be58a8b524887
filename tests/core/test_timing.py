"""
Tests for Timer and timed().
"""

import pytest

from pymatrix.core.compute.timing import Timer, timed


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("reflect"):
            pass
        with timer.section("reflect"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "reflect"}
        assert result["reflect"] >= 0.0
        assert result["total_seconds"] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            pass
        assert "total_seconds" in timer.result()
