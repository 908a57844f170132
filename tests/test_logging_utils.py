import logging

import numpy as np
import pytest

from planar_cuts import Arrangement, Point
from planar_cuts.logging_utils import _safe_repr, apply_debug_logging, debug_log_call


def test_debug_log_call_records_entry_and_exit(caplog):
    logger = logging.getLogger("planar_cuts.tests.trace")

    @debug_log_call(logger)
    def add(a, b=0):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="planar_cuts.tests.trace"):
        assert add(1, b=2) == 3

    assert "Entering" in caplog.text
    assert "args=[1], kwargs={b=2}" in caplog.text
    assert "-> 3" in caplog.text


def test_debug_log_call_is_silent_above_debug(caplog):
    logger = logging.getLogger("planar_cuts.tests.quiet")
    wrapped = debug_log_call(logger)(lambda: 1)

    with caplog.at_level(logging.INFO, logger="planar_cuts.tests.quiet"):
        assert wrapped() == 1

    assert caplog.records == []


def test_debug_log_call_reraises(caplog):
    logger = logging.getLogger("planar_cuts.tests.boom")

    @debug_log_call(logger)
    def boom():
        raise RuntimeError("nope")

    with caplog.at_level(logging.DEBUG, logger="planar_cuts.tests.boom"):
        with pytest.raises(RuntimeError):
            boom()

    assert "Exception in" in caplog.text


def test_wrapping_twice_is_a_no_op():
    logger = logging.getLogger("planar_cuts.tests.twice")
    wrapped = debug_log_call(logger)(lambda: None)

    assert debug_log_call(logger)(wrapped) is wrapped


def test_arrangement_insert_is_traced(caplog):
    arr = Arrangement()
    with caplog.at_level(logging.DEBUG, logger="planar_cuts.arrangement"):
        arr.insert(Point(0, 0), Point(10, 0))

    assert "Entering Arrangement.insert" in caplog.text
    assert "InsertionResult(segment=0" in caplog.text


def test_apply_debug_logging_wraps_public_functions():
    namespace = {"__name__": "fake_module"}

    def public():
        return "ok"

    def _private():
        return "hidden"

    public.__module__ = "fake_module"
    _private.__module__ = "fake_module"
    namespace["public"] = public
    namespace["_private"] = _private

    apply_debug_logging(namespace)

    assert getattr(namespace["public"], "_debug_logging_wrapped", False)
    assert namespace["_private"] is _private
    assert namespace["public"]() == "ok"


def test_safe_repr_summaries():
    assert _safe_repr(Point(1, 2.5)) == "(1, 2.5)"
    assert _safe_repr(np.zeros((2, 2))) == "ndarray(shape=(2, 2), values=[[0.0, 0.0], [0.0, 0.0]])"
    assert _safe_repr(np.zeros((10, 10))) == "ndarray(shape=(10, 10), dtype=float64)"
    assert _safe_repr(list(range(8))) == "[0, 1, 2, 3, 4, ... (8 total)]"
