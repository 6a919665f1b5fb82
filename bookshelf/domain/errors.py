"""Domain-specific exceptions for the book collection.

This module contains all domain-level exceptions that represent contract
violations and error conditions within the collection framework. These
exceptions are framework-agnostic: the command interpreter reports them on
stderr and the API layer maps them to HTTP responses.
"""


class DomainError(Exception):
    """Base class for all domain-specific errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when a record field violates its invariant."""

    def __init__(self, field: str, reason: str) -> None:
        message = f"Invalid {field}: {reason}"
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field
        self.reason = reason


class CollectionError(DomainError):
    """Base class for collection-related errors."""


class ItemIndexError(CollectionError):
    """Raised when a slot index falls outside the collection."""

    def __init__(self, index: int, size: int) -> None:
        message = f"Index {index} is out of range for collection of size {size}"
        super().__init__(message, "ITEM_INDEX_OUT_OF_RANGE")
        self.index = index
        self.size = size


class CollectionLoadError(CollectionError):
    """Raised when a collection file cannot be opened or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        message = f"Failed to load collection from '{path}': {reason}"
        super().__init__(message, "COLLECTION_LOAD_FAILED")
        self.path = path
        self.reason = reason


class CollectionSaveError(CollectionError):
    """Raised when a collection file cannot be written."""

    def __init__(self, path: str, reason: str) -> None:
        message = f"Failed to save collection to '{path}': {reason}"
        super().__init__(message, "COLLECTION_SAVE_FAILED")
        self.path = path
        self.reason = reason


class CodecError(DomainError):
    """Base class for binary encoding and decoding errors."""


class RecordDecodeError(CodecError):
    """Raised when a record cannot be read back from a byte stream."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Malformed record: {reason}", "RECORD_DECODE_FAILED")
        self.reason = reason


class RecordEncodeError(CodecError):
    """Raised when a value cannot be represented in the binary format."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Cannot encode record: {reason}", "RECORD_ENCODE_FAILED")
        self.reason = reason


class CommandError(DomainError):
    """Base class for command interpreter input errors."""


class UnknownCommandError(CommandError):
    """Raised when a command line names no known command."""

    def __init__(self, command: str) -> None:
        super().__init__(f"invalid command '{command}'", "UNKNOWN_COMMAND")
        self.command = command


class ArgumentCountError(CommandError):
    """Raised when a command receives the wrong number of arguments."""

    def __init__(self, command: str, expected: str, actual: int) -> None:
        message = (
            f"wrong argument number in {command} command "
            f"(expected {expected}, got {actual})"
        )
        super().__init__(message, "WRONG_ARGUMENT_COUNT")
        self.command = command
        self.expected = expected
        self.actual = actual


class ArgumentParseError(CommandError):
    """Raised when a command argument cannot be parsed."""

    def __init__(self, argument: str, value: str, reason: str) -> None:
        message = f"invalid {argument} '{value}': {reason}"
        super().__init__(message, "INVALID_ARGUMENT")
        self.argument = argument
        self.value = value
        self.reason = reason
