
"""
Vector arithmetic used by the line searches

Any object providing subtract, dot and scaled_add can be given to a search
through the vector_ops keyword, so that parameters need not be numpy arrays.
"""

import numpy

__all__ = ['VectorOps', 'numpy_ops']

class VectorOps(object):
  """
  Vector operations on numpy arrays (or anything numpy.asarray accepts)
  """
  def subtract(self, a, b):
    """
    Returns a - b
    Part of the interface given to the searches, MoreThuenteSearch itself does not call it
    """
    return numpy.asarray(a) - numpy.asarray(b)

  def dot(self, a, b):
    """
    Returns the scalar product of a and b as a float
    """
    return float(numpy.dot(numpy.ravel(a), numpy.ravel(b)))

  def scaled_add(self, base, scalar, direction):
    """
    Returns base + scalar * direction
    """
    return numpy.asarray(base) + scalar * numpy.asarray(direction)

numpy_ops = VectorOps()
