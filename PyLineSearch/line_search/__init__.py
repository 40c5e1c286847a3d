
"""
Module containing the More-Thuente line search

Line Searches :
  - MoreThuenteSearch
    - finds a candidate according to the strong Wolfe conditions, with safeguarded
      cubic and quadratic interpolation of the cost along the direction

Building blocks :
  - StepPoint
    - a step length with its cost and directional derivative
  - IntervalState
    - the interval of uncertainty of a search
  - SearchConfiguration
    - the validated constants of a search
  - update_step
    - the safeguarded step used by MoreThuenteSearch, a pure function
"""

from .step import *
from .configuration import *
from .step_updater import *
from .more_thuente import *

line_search__all__ = ['MoreThuenteSearch', 'SearchRun', 'IterationData', 'SearchResult',
                      'StepPoint', 'IntervalState', 'SearchConfiguration', 'update_step', 'cubic_minimizer']
__all__ = line_search__all__
