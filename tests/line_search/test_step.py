#/usr/bin/env python

from numpy.testing import assert_almost_equal, assert_equal

from PyLineSearch.line_search import StepPoint, IntervalState

def test_shift_and_unshift():
  point = StepPoint(2., 3., -1.)
  shifted = point.shifted(-0.5)
  assert_equal(shifted, StepPoint(2., 4., -0.5))
  restored = shifted.unshifted(-0.5)
  assert_almost_equal(restored.value, point.value)
  assert_almost_equal(restored.slope, point.slope)
  assert_equal(restored.position, point.position)

def test_origin_is_not_changed_by_shift():
  origin = StepPoint.initial(1., -4.)
  assert_equal(origin.shifted(-1e-4).value, 1.)

def test_moved_keeps_value_and_slope():
  point = StepPoint(1., 2., 3.).moved(5.)
  assert_equal(point, StepPoint(5., 2., 3.))

def test_start():
  interval = IntervalState.start(1., -4., 10.)
  assert_equal(interval.low, StepPoint(0., 1., -4.))
  assert interval.low is interval.high
  assert not interval.bracketed
  assert_equal(interval.width, 10.)
  assert_equal(interval.previous_width, 20.)

def test_search_bounds_extrapolate_until_bracketed():
  interval = IntervalState.start(1., -4., 10.)
  assert_equal(interval.search_bounds(1., 4.), (0., 5.))
  interval.low = StepPoint(1., 0.5, -1.)
  assert_equal(interval.search_bounds(2., 4.), (1., 6.))

def test_search_bounds_of_bracket_are_ordered():
  interval = IntervalState(StepPoint(3., 0., 1.), StepPoint(1., 2., -1.), True)
  assert_equal(interval.search_bounds(2., 4.), (1., 3.))
  assert_equal(interval.bounds(), (1., 3.))
  assert_equal(interval.length(), 2.)
  assert_equal(interval.midpoint(), 2.)

def test_widths_change_only_when_bracketed():
  interval = IntervalState.start(1., -4., 10.)
  interval.high = StepPoint(4., 2., 1.)
  interval.update_widths()
  assert_equal((interval.width, interval.previous_width), (10., 20.))
  interval.bracketed = True
  interval.update_widths()
  assert_equal((interval.width, interval.previous_width), (4., 10.))

def test_repr():
  assert repr(IntervalState.start(1., -4., 10.)).startswith("IntervalState(low=StepPoint(")
