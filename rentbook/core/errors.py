"""Exception hierarchy for rentbook."""


class RentbookError(Exception):
    """Base exception for all rentbook errors."""


class StoreFault(RentbookError):
    """Raised when the relational store fails (connection, driver, schema)."""


class InvalidReferenceError(RentbookError):
    """Raised when a referential column points at the wrong row."""


class RoomHouseMismatchError(InvalidReferenceError):
    """Raised when a tenant's room is missing or belongs to another house."""


class DuplicatePaymentError(RentbookError):
    """Raised when a tenant already has a payment recorded for the month."""
