"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Amount, frequency or payment method is outside its allowed values"""

    pass


class InvalidDateError(DomainException):
    """Date is malformed, impossible, or out of order"""

    pass
