
"""
Points along the search line and the interval of uncertainty built from them
"""

from collections import namedtuple

__all__ = ['StepPoint', 'IntervalState']

class StepPoint(namedtuple('StepPoint', ['position', 'value', 'slope'])):
  """
  A step length with the cost and the directional derivative evaluated there
  """
  __slots__ = ()

  @classmethod
  def initial(cls, value, slope):
    """
    The origin of the search line
    """
    return cls(0., value, slope)

  def moved(self, position):
    return self._replace(position = position)

  def shifted(self, dgtest):
    """
    Returns the point on the modified function psi(a) = f(a) - a * dgtest
    """
    return StepPoint(self.position, self.value - self.position * dgtest, self.slope - dgtest)

  def unshifted(self, dgtest):
    """
    Inverse of shifted
    """
    return StepPoint(self.position, self.value + self.position * dgtest, self.slope + dgtest)


class IntervalState(object):
  """
  The interval of uncertainty of the search
    - low is the step with the least cost found so far
    - high is the other endpoint of the interval
    - bracketed is True once a minimizer is known to lie between low and high
    - width and previous_width are the last two interval lengths, used to force sufficient shrinking
  """
  def __init__(self, low, high, bracketed = False, width = float('nan'), previous_width = float('nan')):
    self.low = low
    self.high = high
    self.bracketed = bracketed
    self.width = width
    self.previous_width = previous_width

  @classmethod
  def start(cls, value, slope, width):
    """
    Both endpoints at the origin, nothing bracketed yet
    """
    origin = StepPoint.initial(value, slope)
    return cls(origin, origin, False, width, 2. * width)

  def bounds(self):
    return (min(self.low.position, self.high.position), max(self.low.position, self.high.position))

  def search_bounds(self, trial_position, extrapolation_factor):
    """
    Returns the range (stmin, stmax) the next step may be chosen in
    """
    if self.bracketed:
      return self.bounds()
    return (self.low.position, trial_position + extrapolation_factor * (trial_position - self.low.position))

  def length(self):
    return abs(self.high.position - self.low.position)

  def midpoint(self):
    return self.low.position + 0.5 * (self.high.position - self.low.position)

  def update_widths(self):
    if self.bracketed:
      self.previous_width = self.width
      self.width = self.length()

  def __repr__(self):
    return "IntervalState(low=%r, high=%r, bracketed=%r, width=%r, previous_width=%r)" % (
      self.low, self.high, self.bracketed, self.width, self.previous_width)
