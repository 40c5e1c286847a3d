"""
Cost functions used by the line search tests
"""

import numpy
from scipy.optimize import rosen, rosen_der

from PyLineSearch.errors import EvaluationError


class Parabola(object):
  """
  f(x) = sum(x**2)
  """
  def __call__(self, x):
    return float(numpy.sum(x ** 2))

  def gradient(self, x):
    return 2. * x


class Quadratic(object):
  """
  A simple quadratic function, minimum at (1, 3)
  """
  def __call__(self, x):
    return (x[0] + 2* x[1] - 7)**2 + (2 * x[0] + x[1] - 5)**2

  def gradient(self, x):
    return numpy.array([2 * (x[0] + 2* x[1] - 7) + 4 * (2 * x[0] + x[1] - 5), 4 * (x[0] + 2* x[1] - 7) + 2 * (2 * x[0] + x[1] - 5)], dtype = float)


class Cubic(object):
  def __call__(self, x):
    return (x[0] - 2.) ** 3 + (2 * x[1] + 4) ** 2

  def gradient(self, x):
    return numpy.array((3. * (x[0] - 2) ** 2, 4 * (2 * x[1] + 4)))


class Linear(object):
  """
  Unbounded below along positive directions
  """
  def __call__(self, x):
    return -float(numpy.sum(x))

  def gradient(self, x):
    return -numpy.ones_like(x)


class Kink(object):
  """
  f(x) = |x - 1| + 0.01 x, no step satisfies the curvature condition for small c2
  """
  def __call__(self, x):
    return float(numpy.sum(numpy.abs(x - 1.) + 0.01 * x))

  def gradient(self, x):
    return numpy.sign(x - 1.) + 0.01


class Rosenbrock(object):
  def __call__(self, x):
    return rosen(x)

  def gradient(self, x):
    return rosen_der(x)


class Counting(Parabola):
  """
  Parabola counting its evaluations
  """
  def __init__(self):
    self.calls = 0

  def __call__(self, x):
    self.calls += 1
    return Parabola.__call__(self, x)


class Failing(Parabola):
  """
  Fails for every step longer than limit
  """
  def __init__(self, origin, limit):
    self.origin = origin
    self.limit = limit

  def __call__(self, x):
    if numpy.linalg.norm(x - self.origin) > self.limit:
      raise EvaluationError("cost is undefined", x)
    return Parabola.__call__(self, x)


def wolfe_conditions_hold(function, origin, direction, alpha, c1, c2):
  gradient = function.gradient(origin)
  dginit = numpy.dot(gradient, direction)
  point = origin + alpha * direction
  armijo = function(point) <= function(origin) + c1 * alpha * dginit
  curvature = abs(numpy.dot(function.gradient(point), direction)) <= c2 * abs(dginit)
  return armijo and curvature
