
"""
Defines the defaults parameters and the termination codes of the line searches
"""

import numpy

__all__ = ['parameters', 'messages']

MAX_ITER_REACHED = 0
STRONG_WOLFE_SATISFIED = 1
INTERVAL_TOO_SMALL = 2
STEP_AT_ALPHA_MIN = 4
STEP_AT_ALPHA_MAX = 5
ROUNDING_ERRORS = 6

parameters = {
              'c1' : 1e-4,
              'c2' : 0.9,
              'alpha' : 1.,
              'alpha_min' : numpy.sqrt(numpy.finfo(float).eps),
              'alpha_max' : numpy.inf,
              'xtol' : 1e-10,
              'extrapolation_factor' : 4.,
              'iterations_max' : 20,
              'bracket_shrink' : 0.66,
              'safeguard_fraction' : 0.66,
              }

messages = {
            MAX_ITER_REACHED : "maximum number of line search iterations reached",
            STRONG_WOLFE_SATISFIED : "sufficient decrease and curvature conditions hold",
            INTERVAL_TOO_SMALL : "relative width of the interval of uncertainty is at most xtol",
            STEP_AT_ALPHA_MIN : "the step is at the lower bound alpha_min",
            STEP_AT_ALPHA_MAX : "the step is at the upper bound alpha_max",
            ROUNDING_ERRORS : "rounding errors prevent further progress, the interval may be degenerate",
            }

def termination_message(info):
  """
  Returns the text associated with a termination code
  """
  return messages.get(info, "unknown termination code %s" % info)
