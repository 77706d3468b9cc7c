"""Domain-specific exceptions"""

from typing import Iterable


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """One or more applicant fields violate their constraints"""

    def __init__(self, messages: Iterable[str]):
        self.messages = list(messages)
        super().__init__(f"Validation failed: {', '.join(self.messages)}")
