
"""
Line search with the More-Thuente algorithm

Finds a step satisfying the strong Wolfe conditions
  f(x0 + alpha * d) <= f(x0) + c1 * alpha * g(x0).d
  |g(x0 + alpha * d).d| <= c2 * |g(x0).d|
The interval of uncertainty is first enlarged until a minimizer is bracketed, then
shrunk with safeguarded cubic and quadratic interpolations (see step_updater).

Reference :
  J. J. More and D. J. Thuente, Line search algorithms with guaranteed sufficient decrease,
  ACM Transactions on Mathematical Software 20 (1994), pp. 286-307
"""

import logging
from collections import namedtuple

import numpy

from .. import defaults
from ..errors import ConfigurationError, PreconditionError, StateError
from ..vector_ops import numpy_ops
from .configuration import SearchConfiguration, check_initial_alpha
from .step import StepPoint, IntervalState
from .step_updater import update_step, REJECTED

__all__ = ['MoreThuenteSearch', 'SearchRun', 'IterationData', 'SearchResult', 'STAGE1', 'STAGE2']

logger = logging.getLogger(__name__)

STAGE1 = 1
STAGE2 = 2

_eps = numpy.finfo(float).eps

IterationData = namedtuple('IterationData', ['param', 'cost', 'alpha', 'terminated', 'info'])

SearchResult = namedtuple('SearchResult', ['param', 'cost', 'gradient', 'alpha', 'info', 'message'])

class SearchRun(object):
  """
  Everything that changes during one search, created by MoreThuenteSearch.init()
  """
  def __init__(self, param, cost, gradient, direction, dginit, alpha, config):
    self.initial_param = param
    self.initial_cost = cost
    self.direction = direction
    self.dginit = dginit
    # constants of this search, later setter calls do not change them
    self.config = config
    self.dgtest = config.c1 * dginit
    self.trial = StepPoint(alpha, numpy.nan, numpy.nan)
    self.interval = IntervalState.start(cost, dginit, config.alpha_max - config.alpha_min)
    self.stage = STAGE1
    # result of the last update_step, REJECTED forces the search to stop
    self.infoc = 1
    self.iteration = 0
    self.terminated = False
    self.info = None

    # last evaluated point
    self.alpha = 0.
    self.param = param
    self.cost = cost
    self.gradient = gradient
    # gradient at interval.low
    self.best_gradient = gradient


class MoreThuenteSearch(object):
  """
  The More-Thuente line search for the strong Wolfe conditions

  It can be driven step by step (init() then next_iter() until the returned data is terminated),
  run in one go (run()), or called like the other line searches of the toolbox.
  """
  def __init__(self, function = None, alpha = None, iterations_max = None, vector_ops = numpy_ops, **kwargs):
    """
    Initializes the search
    Can have :
      - the function to minimize, a callable with a gradient method (function)
      - the first step size that will be tried (alpha = 1.)
      - the maximum number of iterations of run() (iterations_max = 20)
      - c1 and c2, the Wolfe factors (1e-4 and 0.9)
      - alpha_min and alpha_max, the limits of the step (sqrt(eps) and inf)
      - xtol, the relative tolerance on the width of the interval of uncertainty (1e-10)
      - extrapolation_factor, how far an unbracketed step may go (4.)
      - the object giving subtract, dot and scaled_add on the parameters (vector_ops)
      - a recorder that will be called with the state of each iteration (record = self.recordHistory)
    Invalid parameters raise a ConfigurationError
    """
    self.function = function
    self.vector_ops = vector_ops
    self.recordHistory = kwargs.pop('record', self.recordHistory)
    self.config = SearchConfiguration.create(**kwargs)
    if alpha is None:
      alpha = defaults.parameters['alpha']
    check_initial_alpha(alpha)
    self.alpha = alpha
    if iterations_max is None:
      iterations_max = defaults.parameters['iterations_max']
    self.iterations_max = iterations_max

    self.initial_param = None
    self.initial_cost = None
    self.initial_gradient = None
    self.direction = None
    self._run = None

  def set_c(self, c1, c2):
    """
    Sets c1 and c2, 0 < c1 < c2 < 1
    """
    self.config = self.config.replace(c1 = c1, c2 = c2)
    return self

  def set_alpha_min_max(self, alpha_min, alpha_max):
    """
    Sets the limits of the step, 0 <= alpha_min < alpha_max
    """
    self.config = self.config.replace(alpha_min = alpha_min, alpha_max = alpha_max)
    return self

  def set_initial_alpha(self, alpha):
    check_initial_alpha(alpha)
    self.alpha = alpha
    return self

  def set_search_direction(self, direction):
    self.direction = direction
    return self

  def set_initial_parameter(self, param):
    self.initial_param = param
    return self

  def set_initial_cost(self, cost):
    self.initial_cost = cost
    return self

  def set_initial_gradient(self, gradient):
    self.initial_gradient = gradient
    return self

  def calc_initial_cost(self):
    """
    Computes the cost at the initial parameter with the function
    """
    self.initial_cost = self.function(self._initial_param())
    return self

  def calc_initial_gradient(self):
    """
    Computes the gradient at the initial parameter with the function
    """
    self.initial_gradient = self.function.gradient(self._initial_param())
    return self

  def _initial_param(self):
    if self.initial_param is None:
      raise ConfigurationError("Initial parameter not set. Call `set_initial_parameter`.")
    if self.function is None:
      raise ConfigurationError("No function to evaluate.")
    return self.initial_param

  def init(self, alpha = None):
    """
    Checks the inputs and starts a new search
    The first step is alpha if given, else the configured initial alpha
    """
    if self.initial_param is None:
      raise ConfigurationError("Initial parameter not set. Call `set_initial_parameter`.")
    if self.initial_cost is None:
      raise ConfigurationError("Initial cost not set. Call `set_initial_cost` or `calc_initial_cost`.")
    if self.initial_gradient is None:
      raise ConfigurationError("Initial gradient not set. Call `set_initial_gradient` or `calc_initial_gradient`.")
    if self.direction is None:
      raise ConfigurationError("Search direction not set. Call `set_search_direction`.")
    if self.function is None:
      raise ConfigurationError("No function to evaluate.")
    if alpha is None:
      alpha = self.alpha
    else:
      check_initial_alpha(alpha)

    dginit = self.vector_ops.dot(self.initial_gradient, self.direction)
    if not dginit < 0.:
      raise PreconditionError("Search direction must be a descent direction, g.d = %s" % dginit)

    self._run = SearchRun(self.initial_param, self.initial_cost, self.initial_gradient,
                          self.direction, dginit, alpha, self.config)
    return self

  @property
  def search_run(self):
    return self._run

  def _running(self):
    if self._run is None:
      raise StateError("The search is not initialized. Call `init`.")
    if self._run.terminated:
      raise StateError("The search is terminated. Call `init` to start a new one.")
    return self._run

  def next_iter(self):
    """
    Does one iteration : evaluates the current trial step, tests for termination and computes the
    next trial step
    Returns an IterationData, with the evaluated point if terminated, else the next point to be tried
    """
    run = self._running()
    config = run.config
    interval = run.interval
    run.iteration += 1

    stmin, stmax = interval.search_bounds(run.trial.position, config.extrapolation_factor)
    alpha = min(max(run.trial.position, config.alpha_min), config.alpha_max)

    # unusual termination ahead, use the best step so far
    if (interval.bracketed and (alpha <= stmin or alpha >= stmax)) \
        or (interval.bracketed and stmax - stmin <= config.xtol * stmax) \
        or run.infoc == REJECTED:
      alpha = interval.low.position

    param = self.vector_ops.scaled_add(run.initial_param, alpha, run.direction)
    try:
      cost = self.function(param)
      gradient = self.function.gradient(param)
    except Exception:
      self._run = None
      raise
    slope = self.vector_ops.dot(run.direction, gradient)
    trial = StepPoint(alpha, cost, slope)
    run.alpha, run.param, run.cost, run.gradient = alpha, param, cost, gradient

    ftest1 = run.initial_cost + alpha * run.dgtest
    info = None
    if cost <= ftest1 and abs(slope) <= config.c2 * (-run.dginit):
      info = defaults.STRONG_WOLFE_SATISFIED
    elif interval.bracketed and stmax - stmin <= config.xtol * stmax:
      info = defaults.INTERVAL_TOO_SMALL
    elif abs(alpha - config.alpha_min) < _eps and (cost > ftest1 or slope >= run.dgtest):
      info = defaults.STEP_AT_ALPHA_MIN
    elif abs(alpha - config.alpha_max) < _eps and cost <= ftest1 and slope <= run.dgtest:
      info = defaults.STEP_AT_ALPHA_MAX
    elif (interval.bracketed and (alpha <= stmin or alpha >= stmax)) or run.infoc == REJECTED:
      info = defaults.ROUNDING_ERRORS

    if info is not None:
      run.terminated = True
      run.info = info
      self._record(run, trial)
      if info == defaults.ROUNDING_ERRORS:
        logger.debug("line search broke down at alpha = %g after %d iterations", alpha, run.iteration)
      else:
        logger.debug("line search stopped at alpha = %g after %d iterations : %s",
                     alpha, run.iteration, defaults.termination_message(info))
      return IterationData(param, cost, alpha, True, info)

    if run.stage == STAGE1 and cost <= ftest1 and slope >= min(config.c1, config.c2) * run.dginit:
      run.stage = STAGE2

    if run.stage == STAGE1 and cost > ftest1 and cost <= interval.low.value:
      # use the modified function psi(a) = f(a) - a * dgtest while nothing satisfies the sufficient decrease
      dgtest = run.dgtest
      low, high, new_trial, bracketed, infoc = update_step(interval.low.shifted(dgtest),
                                                           interval.high.shifted(dgtest),
                                                           trial.shifted(dgtest),
                                                           interval.bracketed, stmin, stmax)
      low, high = low.unshifted(dgtest), high.unshifted(dgtest)
      new_trial = trial.moved(new_trial.position)
    else:
      low, high, new_trial, bracketed, infoc = update_step(interval.low, interval.high, trial,
                                                           interval.bracketed, stmin, stmax)

    if low.position == alpha:
      run.best_gradient = gradient
    interval.low, interval.high, interval.bracketed = low, high, bracketed
    run.infoc = infoc
    if numpy.isnan(new_trial.position):
      run.infoc = REJECTED
    run.trial = new_trial

    if interval.bracketed:
      if interval.length() >= defaults.parameters['bracket_shrink'] * interval.previous_width:
        run.trial = run.trial.moved(interval.midpoint())
      interval.update_widths()

    self._record(run, trial)
    next_alpha = min(max(run.trial.position, config.alpha_min), config.alpha_max)
    next_param = self.vector_ops.scaled_add(run.initial_param, next_alpha, run.direction)
    return IterationData(next_param, run.trial.value, next_alpha, False, None)

  def run(self, iterations_max = None):
    """
    Iterates until termination or until iterations_max iterations were done
    A new search is started if none is running
    Returns the last IterationData
    """
    if iterations_max is None:
      iterations_max = self.iterations_max
    if self._run is None or self._run.terminated:
      self.init()
    run = self._run
    while run.iteration < iterations_max:
      data = self.next_iter()
      if data.terminated:
        return data

    # no step satisfied the conditions, keep the best one
    run.terminated = True
    run.info = defaults.MAX_ITER_REACHED
    best = run.interval.low
    run.alpha = best.position
    run.param = self.vector_ops.scaled_add(run.initial_param, best.position, run.direction)
    run.cost = best.value
    run.gradient = run.best_gradient
    logger.debug("line search reached %d iterations, keeping alpha = %g", run.iteration, best.position)
    return IterationData(run.param, run.cost, run.alpha, True, run.info)

  def result(self):
    """
    Returns the SearchResult of a terminated search
    """
    if self._run is None or not self._run.terminated:
      raise StateError("No terminated search to get a result from.")
    run = self._run
    return SearchResult(run.param, run.cost, run.gradient, run.alpha, run.info,
                        defaults.termination_message(run.info))

  def _record(self, run, trial):
    self.recordHistory(iteration = run.iteration, alpha = trial.position, value = trial.value,
                       slope = trial.slope, bracketed = run.interval.bracketed, stage = run.stage,
                       stx = run.interval.low, sty = run.interval.high, info = run.info)

  def recordHistory(self, **kwargs):
    """
    Function that does nothing, called with the state of each iteration
    """
    pass

  def __call__(self, origin, function, state, **kwargs):
    """
    Returns a good candidate
    Parameters :
      - origin is the origin of the search
      - function is the function to minimize
      - state is the state of the optimizer
    state must contain the direction and may contain the gradient at origin (gradient), the cost at
    origin (old_value) and the first step to try (initial_alpha_step)
    The step is saved in state['alpha_step'], the termination code in state['line_search_info']
    """
    self.function = function
    self.set_initial_parameter(origin)
    self.set_search_direction(state['direction'])
    if 'gradient' in state:
      self.set_initial_gradient(state['gradient'])
    else:
      self.calc_initial_gradient()
      state['gradient'] = self.initial_gradient
    if 'old_value' in state:
      self.set_initial_cost(state['old_value'])
    else:
      self.calc_initial_cost()

    self.init(state.get('initial_alpha_step'))
    self.run()
    result = self.result()

    state['alpha_step'] = result.alpha
    state['line_search_info'] = result.info
    state['line_search_value'] = result.cost
    state['line_search_gradient'] = result.gradient
    return result.param
