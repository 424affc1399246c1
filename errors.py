class CXQError(Exception):
    def __init__(self, message, detail=None):
        Exception.__init__(self, message)
        self.message = message
        self.detail = detail


class ArgumentError(CXQError):
    pass


class InputError(CXQError):
    pass


class NamespaceFormatError(CXQError):
    pass


class NamespaceRegistrationError(CXQError):
    pass


class EvaluationError(CXQError):
    pass
