"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidIntervalError(DomainException):
    """Requested interval unit or interval count is not supported"""

    pass


class DataIntegrityError(DomainException):
    """Stored ledger or goal data cannot be interpreted"""

    pass
