"""Exception types raised by the distillforge models."""


class DistillForgeError(Exception):
    """Base class for all distillforge errors."""


class InvalidParameterError(DistillForgeError, ValueError):
    """A generator was called with parameters outside its valid domain."""


class ComputationError(DistillForgeError, ArithmeticError):
    """A primitive equation hit a division by zero or a non-finite result."""
