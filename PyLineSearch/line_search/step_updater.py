
"""
Safeguarded step of the More-Thuente line search

update_step computes the next trial step from the interval of uncertainty and
the last trial, with cubic and quadratic (secant) interpolation, and updates
the interval. It does not evaluate anything, so it can be tested on its own.

Reference :
  J. J. More and D. J. Thuente, Line search algorithms with guaranteed sufficient decrease,
  ACM Transactions on Mathematical Software 20 (1994), pp. 286-307
"""

import numpy

from .. import defaults

__all__ = ['update_step', 'cubic_minimizer', 'REJECTED']

REJECTED = 0

def _as_float64(point):
  return point.__class__(*[numpy.float64(v) for v in point])

def _scaled_gamma(theta, ga, gb):
  """
  sqrt(theta**2 - ga * gb), computed with the largest magnitude factored out
  """
  s = max(abs(theta), abs(ga), abs(gb))
  return s * numpy.sqrt(max(0., (theta / s) ** 2 - (ga / s) * (gb / s)))

def cubic_minimizer(a, b):
  """
  Minimizer of the cubic interpolating the values and slopes of the two StepPoint a and b,
  expressed from a
  """
  theta = 3. * (a.value - b.value) / (b.position - a.position) + a.slope + b.slope
  gamma = _scaled_gamma(theta, a.slope, b.slope)
  if b.position < a.position:
    gamma = -gamma
  p = (gamma - a.slope) + theta
  q = ((gamma - a.slope) + gamma) + b.slope
  return a.position + (p / q) * (b.position - a.position)

def _secant(a, b):
  """
  Zero of the linear interpolation of the slopes, expressed from a
  """
  return a.position + (a.slope / (a.slope - b.slope)) * (b.position - a.position)

def update_step(low, high, trial, bracketed, stmin, stmax):
  """
  Computes a safeguarded step and updates the interval of uncertainty
  Parameters :
    - low is the StepPoint with the least value found so far
    - high is the other endpoint of the interval
    - trial is the StepPoint that was just evaluated
    - bracketed tells if a minimizer is known to lie between low and high
    - stmin and stmax are the bounds for the new step
  Returns (low, high, trial, bracketed, info), where trial carries the new position.
  info is the case that was used (1 to 4), or REJECTED if the input was inconsistent,
  in which case everything is returned unchanged.
  """
  stmin = numpy.float64(stmin)
  stmax = numpy.float64(stmax)
  lower, upper = min(low.position, high.position), max(low.position, high.position)
  if (bracketed and not lower < trial.position < upper) \
      or low.slope * (trial.position - low.position) >= 0. \
      or stmax < stmin:
    return low, high, trial, bracketed, REJECTED

  xlow, xhigh, xtrial = _as_float64(low), _as_float64(high), _as_float64(trial)
  sx, fx, dx = xlow
  sp, fp, dp = xtrial
  sgnd = dp * numpy.sign(dx)

  with numpy.errstate(divide = 'ignore', invalid = 'ignore', over = 'ignore'):
    if fp > fx:
      # higher function value, the minimum is bracketed
      info = 1
      bound = True
      stpc = cubic_minimizer(xlow, xtrial)
      stpq = sx + ((dx / ((fx - fp) / (sp - sx) + dx)) / 2.) * (sp - sx)
      if abs(stpc - sx) < abs(stpq - sx):
        stpf = stpc
      else:
        stpf = stpc + (stpq - stpc) / 2.
      bracketed = True
    elif sgnd < 0.:
      # lower function value, derivatives of opposite sign
      info = 2
      bound = False
      stpc = cubic_minimizer(xtrial, xlow)
      stpq = _secant(xtrial, xlow)
      if abs(stpc - sp) > abs(stpq - sp):
        stpf = stpc
      else:
        stpf = stpq
      bracketed = True
    elif abs(dp) < abs(dx):
      # lower function value, same sign, the derivative decreases in magnitude
      info = 3
      bound = True
      theta = 3. * (fx - fp) / (sp - sx) + dx + dp
      # gamma is zero only when the cubic does not tend to infinity in the direction of the step
      gamma = _scaled_gamma(theta, dx, dp)
      if sp > sx:
        gamma = -gamma
      p = (gamma - dp) + theta
      q = (gamma + (dx - dp)) + gamma
      r = p / q
      if r < 0. and gamma != 0.:
        stpc = sp + r * (sx - sp)
      elif sp > sx:
        stpc = stmax
      else:
        stpc = stmin
      stpq = _secant(xtrial, xlow)
      if bracketed:
        stpf = stpc if abs(sp - stpc) < abs(sp - stpq) else stpq
      else:
        stpf = stpc if abs(sp - stpc) > abs(sp - stpq) else stpq
    else:
      # lower function value, same sign, the derivative does not decrease in magnitude
      info = 4
      bound = False
      if bracketed:
        stpf = cubic_minimizer(xtrial, xhigh)
      elif sp > sx:
        stpf = stmax
      else:
        stpf = stmin

  if fp > fx:
    high = trial
  else:
    if sgnd < 0.:
      high = low
    low = trial

  stpf = max(stmin, min(stmax, stpf))
  if bracketed and bound:
    limit = low.position + defaults.parameters['safeguard_fraction'] * (high.position - low.position)
    if high.position > low.position:
      stpf = min(stpf, limit)
    else:
      stpf = max(stpf, limit)

  return low, high, trial.moved(float(stpf)), bracketed, info
