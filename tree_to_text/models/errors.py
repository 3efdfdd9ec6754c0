from enum import StrEnum, auto

__all__ = [
    "Field",
    "DecodeError",
    "UsageError",
    "UnexpectedEof",
    "InvalidHeader",
    "InvalidSizeField",
    "EmptyPermissions",
    "InvalidPermissions",
    "InvalidFilename",
    "IoError",
]


class Field(StrEnum):
    HEADER = auto()
    SIZE = auto()
    PERMISSIONS = auto()
    FILENAME = auto()
    HASH = auto()


class DecodeError(Exception):
    """Base class for every fatal tree decoding failure.

    ``field`` names the part of the record being read when the failure was
    detected and ``offset`` is the number of input bytes consumed so far.
    """

    message = "Tree decoding failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        field: Field | None = None,
        offset: int | None = None,
    ):
        self.field = field
        self.offset = offset
        super().__init__(message or self.message)

    def __str__(self):
        text = super().__str__()
        where = []
        if self.field is not None:
            where.append(str(self.field))
        if self.offset is not None:
            where.append(f"offset {self.offset}")
        if where:
            return f"{text} ({', '.join(where)})"
        return text


class UsageError(Exception):
    """Raised by the command line front end; no input has been read."""


class UnexpectedEof(DecodeError):
    message = "Unexpected end of input"

    def __init__(self, *, field: Field, offset: int | None = None):
        super().__init__(
            f"Unexpected end of input in {field} field", field=field, offset=offset
        )


class InvalidHeader(DecodeError):
    message = "Invalid tree header"


class InvalidSizeField(DecodeError):
    message = "Invalid character in size field"


class EmptyPermissions(DecodeError):
    message = "Empty file permissions"


class InvalidPermissions(DecodeError):
    message = "Invalid file permissions"


class InvalidFilename(DecodeError):
    message = "Filename has a colon or newline char"


class IoError(DecodeError):
    message = "I/O error"
