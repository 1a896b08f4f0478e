"""Exceptions raised by the Monty Hall simulation."""


class MontyHallError(Exception):
    """Base class for all simulation errors."""


class InvalidArgumentError(MontyHallError, ValueError):
    """Raised when a caller passes a value outside the modeled domain."""


class ContractViolationError(MontyHallError, AssertionError):
    """Raised when an internal game invariant no longer holds."""
