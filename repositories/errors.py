"""
repositories/errors.py
----------------------
Domain errors raised by the data access layer in place of raw driver errors.
"""


class RepositoryError(Exception):
    """Base class for errors raised by repositories."""


class DuplicateEmailError(RepositoryError):
    """Raised when a user is created with an email that is already registered."""

    def __init__(self, email: str):
        super().__init__("Email address is already in use")
        self.email = email
