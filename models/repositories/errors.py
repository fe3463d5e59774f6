"""
Errors raised by the repositories.
"""


class PersistenceError(Exception):
    """A read or write against local storage failed."""
