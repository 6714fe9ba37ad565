class TransportFailure(Exception):
    """Raise if an RPC request for a page of events fails"""

    pass


class TooManyLoopsError(Exception):
    """Raise if a loop runs too many times"""

    pass


class OutputWriteFailure(Exception):
    """Raise if a report file cannot be persisted"""

    pass


class BadConfigException(Exception):
    pass


class MissingEnvironmentVariableException(Exception):
    pass
