## Exceptions

__all__ = ['PyLineSearch_Error', 'ConfigurationError', 'PreconditionError',
           'EvaluationError', 'StateError']


class PyLineSearch_Error(Exception):
    def __init__(self, value=None):
        self.value = value
        self.code = None
    def __str__(self):
        return repr(self.value)
    def __repr__(self):
        return repr(self.value)

class ConfigurationError(PyLineSearch_Error):
    pass

class PreconditionError(PyLineSearch_Error):
    pass

class EvaluationError(PyLineSearch_Error):
    def __init__(self, value, point=None):
        if point is None:
            valstr = ''
        else:
            valstr = ' at point = '+str(point)
        self.point = point
        PyLineSearch_Error.__init__(self, value+valstr)

class StateError(PyLineSearch_Error):
    pass
