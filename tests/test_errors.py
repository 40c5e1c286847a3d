#/usr/bin/env python

from numpy.testing import assert_equal

from PyLineSearch.errors import EvaluationError, PyLineSearch_Error, StateError

def test_error_text():
  error = StateError("no search in progress")
  assert isinstance(error, PyLineSearch_Error)
  assert_equal(str(error), "'no search in progress'")
  assert_equal(repr(error), str(error))

def test_evaluation_error_keeps_the_point():
  error = EvaluationError("cost is undefined", point = 2.5)
  assert_equal(error.point, 2.5)
  assert_equal(error.value, "cost is undefined at point = 2.5")
  assert_equal(EvaluationError("cost is undefined").value, "cost is undefined")
