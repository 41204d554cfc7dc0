"""Domain layer errors."""

from enum import Enum


class ErrorKind(str, Enum):
    """Stable, user-safe error tags returned to clients."""

    HANDLE_TAKEN = "handle_taken"
    INVALID_CREDENTIALS = "invalid_credentials"
    BATCH_ALREADY_EXISTS = "batch_already_exists"
    INVALID_BACKUP_CODE = "invalid_backup_code"
    MIGRATION_ALREADY_COMPLETED = "migration_already_completed"
    PROVIDER_ALREADY_LINKED = "provider_already_linked"
    STORE_UNAVAILABLE = "store_unavailable"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.VALIDATION


class ValidationError(DomainError):
    """Domain validation error."""

    kind = ErrorKind.VALIDATION


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class IdentityError(BusinessRuleViolationError):
    """Expected identity-subsystem outcome that is safe to show to a user.

    Each subclass has a fixed message so that merged failure modes
    (unknown handle vs. wrong key, unknown code vs. used code) cannot be
    told apart by their text.
    """

    message = "Identity operation failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class HandleTakenError(IdentityError):
    """The requested handle already belongs to another identity."""

    kind = ErrorKind.HANDLE_TAKEN
    message = "Handle is not available"


class InvalidCredentialsError(IdentityError):
    """Unknown handle or wrong secret key."""

    kind = ErrorKind.INVALID_CREDENTIALS
    message = "Invalid credentials"

    def __init__(self) -> None:
        super().__init__()


class BatchAlreadyExistsError(IdentityError):
    """A backup code batch was already generated for this identity."""

    kind = ErrorKind.BATCH_ALREADY_EXISTS
    message = "Backup codes have already been generated for this account"


class InvalidBackupCodeError(IdentityError):
    """Unknown, already consumed or wrong backup code."""

    kind = ErrorKind.INVALID_BACKUP_CODE
    message = "Invalid backup code"

    def __init__(self) -> None:
        super().__init__()


class MigrationAlreadyCompletedError(IdentityError):
    """The identity is already registered."""

    kind = ErrorKind.MIGRATION_ALREADY_COMPLETED
    message = "This account has already been migrated"


class ProviderAlreadyLinkedError(IdentityError):
    """Another identity is already bound to this provider reference."""

    kind = ErrorKind.PROVIDER_ALREADY_LINKED
    message = "This provider account is already linked to another identity"


class UnauthenticatedError(DomainError):
    """No valid session accompanies the request."""

    kind = ErrorKind.UNAUTHENTICATED

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Caller is authenticated but lacks the required role."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, message: str = "Insufficient role"):
        super().__init__(message)
