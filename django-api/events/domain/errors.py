"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    UNKNOWN_EVENT = "UNKNOWN_EVENT"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_EVENT_PAYLOAD = "INVALID_EVENT_PAYLOAD"
    ALREADY_PARTICIPANT = "ALREADY_PARTICIPANT"
    NOT_PARTICIPANT = "NOT_PARTICIPANT"
    MISSING_FILE = "MISSING_FILE"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    UPLOAD_FAILED = "UPLOAD_FAILED"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidRequestError(DomainError):
    """Client sent something the service refuses; never retried."""


class NotFoundError(DomainError):
    """A referenced resource does not exist."""


class ServiceFailureError(DomainError):
    """A collaborator failed while carrying out a valid request."""


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class UnknownEventError(InvalidRequestError):
    """Raised when a request references an event that does not exist.

    Used where a missing event is the caller's mistake rather than a lookup
    miss (member listing).
    """

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_EVENT,
            message="Request references an unknown event",
        )
        self.event_id = event_id


class InvalidEventIdError(InvalidRequestError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidEventPayloadError(InvalidRequestError):
    """Raised when an event creation payload is missing or malformed."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_PAYLOAD,
            message=f"Invalid field '{field}': {reason}",
        )
        self.field = field


class AlreadyParticipantError(InvalidRequestError):
    """Raised when a user tries to join an event twice."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_PARTICIPANT,
            message="Already participating in this event",
        )
        self.event_id = event_id


class NotParticipantError(InvalidRequestError):
    """Raised when a non-participant accesses participant-only data."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_PARTICIPANT,
            message="Only participants can access this event's assets",
        )
        self.event_id = event_id


class MissingFileError(InvalidRequestError):
    """Raised when an upload carries no file or an empty one."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FILE,
            message="A non-empty file is required",
        )


class FileTooLargeError(InvalidRequestError):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            code=ErrorCode.FILE_TOO_LARGE,
            message=f"File exceeds the {limit} byte limit",
        )
        self.limit = limit


class UploadFailedError(ServiceFailureError):
    """Raised when file bytes could not be written to storage."""

    def __init__(self, folder: str) -> None:
        super().__init__(
            code=ErrorCode.UPLOAD_FAILED,
            message="File could not be stored",
        )
        self.folder = folder


class PersistenceFailedError(ServiceFailureError):
    """Raised when the event store fails to write."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_FAILED,
            message="Data could not be saved",
        )
        self.operation = operation
