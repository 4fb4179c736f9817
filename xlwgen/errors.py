"""Exception raised by the interface generator."""


class GeneratorError(Exception):
    """Raised when an interface file cannot be read, parsed or written."""