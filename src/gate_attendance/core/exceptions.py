class DomainError(Exception):
    """Base for errors whose message is safe to flash to the user."""


class ValidationError(DomainError):
    """A gate action or form was rejected; the ledger is left unchanged."""


class AuthenticationError(DomainError):
    """Unknown username, wrong password, or a disabled account."""


class AuthorizationError(DomainError):
    """The signed-in role may not manage the requested account."""
