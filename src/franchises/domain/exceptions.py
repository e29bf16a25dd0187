"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
and HTTP layers can catch them uniformly and display user-friendly
messages.

Note that a missing branch or product inside an existing franchise is
NOT an error: edits targeting it are silent no-ops.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class EntityNotFoundError(DomainException):
    """A requested franchise does not exist."""


class StoreError(DomainException):
    """The document store failed to read or write a franchise."""
