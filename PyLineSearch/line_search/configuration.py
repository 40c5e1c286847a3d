
"""
Validated parameters of the More-Thuente search
"""

from collections import namedtuple

from .. import defaults
from ..errors import ConfigurationError

__all__ = ['SearchConfiguration', 'check_c', 'check_alpha_bounds', 'check_initial_alpha',
           'check_xtol', 'check_extrapolation_factor']

def check_c(c1, c2):
  if not 0. < c1 < c2:
    raise ConfigurationError("Parameter c1 must be in (0, c2), got c1 = %s, c2 = %s" % (c1, c2))
  if not c2 < 1.:
    raise ConfigurationError("Parameter c2 must be in (c1, 1), got c2 = %s" % c2)

def check_alpha_bounds(alpha_min, alpha_max):
  if not alpha_min >= 0.:
    raise ConfigurationError("alpha_min must be >= 0, got %s" % alpha_min)
  if not alpha_max > alpha_min:
    raise ConfigurationError("alpha_min must be smaller than alpha_max, got [%s, %s]" % (alpha_min, alpha_max))

def check_initial_alpha(alpha):
  if not alpha > 0.:
    raise ConfigurationError("Initial alpha must be > 0, got %s" % alpha)

def check_xtol(xtol):
  if not xtol >= 0.:
    raise ConfigurationError("xtol must be >= 0, got %s" % xtol)

def check_extrapolation_factor(factor):
  if not factor > 1.:
    raise ConfigurationError("extrapolation_factor must be > 1, got %s" % factor)


_fields = ['c1', 'c2', 'alpha_min', 'alpha_max', 'xtol', 'extrapolation_factor']

class SearchConfiguration(namedtuple('SearchConfiguration', _fields)):
  """
  The constants of one search :
    - c1 is the sufficient decrease (Armijo) factor
    - c2 is the curvature factor, 0 < c1 < c2 < 1
    - alpha_min and alpha_max bound the step length, 0 <= alpha_min < alpha_max
    - xtol is the relative tolerance on the width of the interval of uncertainty
    - extrapolation_factor limits how far an unbracketed step may go beyond the last one
  Build it with create() so that the values are checked.
  """
  __slots__ = ()

  @classmethod
  def create(cls, **kwargs):
    unknown = set(kwargs) - set(_fields)
    if unknown:
      raise ConfigurationError("Unknown search parameters : %s" % ', '.join(sorted(unknown)))
    values = dict((name, kwargs.get(name, defaults.parameters[name])) for name in _fields)
    check_c(values['c1'], values['c2'])
    check_alpha_bounds(values['alpha_min'], values['alpha_max'])
    check_xtol(values['xtol'])
    check_extrapolation_factor(values['extrapolation_factor'])
    return cls(**values)

  def replace(self, **kwargs):
    """
    Returns a checked copy with some parameters changed
    """
    values = self._asdict()
    values.update(kwargs)
    return self.create(**values)
