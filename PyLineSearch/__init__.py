"""PyLineSearch initialization script.

print(PyLineSearch.__LICENSE__)    for the terms of use.
"""

__LICENSE__ = """\
Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

    1. Redistributions of source code must retain the above copyright
      notice, this list of conditions and the following disclaimer.

    2. Redistributions in binary form must reproduce the above
      copyright notice, this list of conditions and the following
      disclaimer in the documentation and/or other materials provided
      with the distribution.

THIS SOFTWARE IS PROVIDED ``AS IS'' AND ANY EXPRESS OR IMPLIED WARRANTIES,
INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND
FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE AUTHORS
BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
CONSEQUENTIAL DAMAGES ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN
IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
"""

__version__ = '0.1.0'

from .errors import *
from . import defaults
from .vector_ops import VectorOps
from .line_search import *

__all__ = ['MoreThuenteSearch', 'SearchRun', 'IterationData', 'SearchResult',
           'StepPoint', 'IntervalState', 'SearchConfiguration', 'update_step',
           'VectorOps', 'defaults',
           'PyLineSearch_Error', 'ConfigurationError', 'PreconditionError',
           'EvaluationError', 'StateError']
