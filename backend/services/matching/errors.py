"""Errors surfaced to callers of the matching service."""

from enum import Enum


class ErrorCode(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.NOT_FOUND: "A resource with the value could not be found.",
    ErrorCode.USER_NOT_FOUND: "User could not be found.",
    ErrorCode.PROJECT_NOT_FOUND: "Project could not be found.",
}


class EntryNotFoundError(LookupError):
    """A requested user or project id does not resolve."""

    def __init__(
        self,
        resource: str,
        identifier: str,
        error_code: ErrorCode = ErrorCode.NOT_FOUND,
    ) -> None:
        super().__init__(f"{resource} with identifier '{identifier}' not found")
        self.resource = resource
        self.identifier = identifier
        self.error_code = error_code
