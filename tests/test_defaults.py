#/usr/bin/env python

from numpy.testing import assert_equal

from PyLineSearch import defaults

def test_every_code_has_a_message():
  for code in (defaults.MAX_ITER_REACHED, defaults.STRONG_WOLFE_SATISFIED, defaults.INTERVAL_TOO_SMALL,
               defaults.STEP_AT_ALPHA_MIN, defaults.STEP_AT_ALPHA_MAX, defaults.ROUNDING_ERRORS):
    assert_equal(defaults.termination_message(code), defaults.messages[code])

def test_unknown_code():
  assert_equal(defaults.termination_message(3), "unknown termination code 3")
