"""Domain-level exceptions.

Every rule violation is a subclass of DomainException so the interactive
shells can catch them uniformly and keep the menu running.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value could not be parsed or violates an invariant."""
