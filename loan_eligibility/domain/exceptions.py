"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Applicant data cannot be scored (non-positive income or amount, bad date of birth)"""

    pass
