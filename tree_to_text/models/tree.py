import binascii
import io
import logging
from enum import StrEnum, auto
from typing import BinaryIO

from tree_to_text.models.config import DEFAULT_CONFIG, DecoderConfig, Grammar
from tree_to_text.models.errors import (
    EmptyPermissions,
    Field,
    InvalidFilename,
    InvalidHeader,
    InvalidPermissions,
    InvalidSizeField,
    IoError,
    UnexpectedEof,
)

__all__ = ["State", "TreeDecoder", "decode_tree", "tree_to_text"]

logger = logging.getLogger(__name__)

NULL_BYTE = 0
SPACE = ord(" ")
COLON = b":"
NEWLINE = b"\n"
FILENAME_DELIMITERS = frozenset(b":\n")


class State(StrEnum):
    HEADER = auto()
    SIZE = auto()
    PERMISSIONS = auto()
    FILENAME = auto()
    HASH = auto()
    DONE = auto()


class TreeDecoder:
    """Streaming converter from a binary tree record to its text form.

    The record ``tree <size>\\0{<perm> <name>\\0<hash>}*`` is consumed one
    byte at a time and every validated byte is written out straight away, so
    ``writer`` may hold a partial record when a :class:`DecodeError` is raised.
    """

    def __init__(
        self,
        reader: BinaryIO,
        writer: BinaryIO,
        config: DecoderConfig = DEFAULT_CONFIG,
    ):
        self.reader = reader
        self.writer = writer
        self.config = config
        self.state = State.HEADER
        self.offset = 0
        self.entries = 0

    def step(self) -> State:
        match self.state:
            case State.HEADER:
                self.state = self._read_header()
            case State.SIZE:
                self.state = self._read_size()
            case State.PERMISSIONS:
                self.state = self._read_permissions()
            case State.FILENAME:
                self.state = self._read_filename()
            case State.HASH:
                self.state = self._read_hash()
            case _:
                raise RuntimeError(f"Decoder already finished at offset {self.offset}")
        return self.state

    def decode(self) -> int:
        while self.state is not State.DONE:
            self.step()
        self._flush()
        logger.debug("Decoded %d entries from %d bytes", self.entries, self.offset)
        return self.entries

    def _read_byte(self, field: Field) -> int | None:
        try:
            data = self.reader.read(1)
        except OSError as exc:
            raise IoError(f"Read failed: {exc}", field=field, offset=self.offset) from exc
        if not data:
            return None
        self.offset += 1
        return data[0]

    def _expect_byte(self, field: Field) -> int:
        byte = self._read_byte(field)
        if byte is None:
            raise UnexpectedEof(field=field, offset=self.offset)
        return byte

    def _write(self, data: bytes, field: Field):
        try:
            self.writer.write(data)
        except OSError as exc:
            raise IoError(f"Write failed: {exc}", field=field, offset=self.offset) from exc

    def _flush(self):
        try:
            self.writer.flush()
        except OSError as exc:
            raise IoError(f"Flush failed: {exc}", offset=self.offset) from exc

    def _read_header(self) -> State:
        if self.config.grammar is Grammar.PERMISSIVE:
            return self._read_header_token()

        expected = self.config.header
        token = bytes(self._expect_byte(Field.HEADER) for _ in expected)
        if token != expected:
            raise InvalidHeader(
                f"Invalid tree header {token!r}", field=Field.HEADER, offset=self.offset
            )
        self._write(token[:-1] + COLON, Field.HEADER)
        return State.SIZE

    def _read_header_token(self) -> State:
        # Any token is accepted up to the first space.
        while (byte := self._expect_byte(Field.HEADER)) != SPACE:
            if byte in FILENAME_DELIMITERS:
                raise InvalidHeader(field=Field.HEADER, offset=self.offset)
            self._write(bytes((byte,)), Field.HEADER)
        self._write(COLON, Field.HEADER)
        return State.SIZE

    def _read_size(self) -> State:
        while (byte := self._expect_byte(Field.SIZE)) != NULL_BYTE:
            if not self.config.grammar.accepts(byte):
                raise InvalidSizeField(field=Field.SIZE, offset=self.offset)
            self._write(bytes((byte,)), Field.SIZE)
        self._write(NEWLINE, Field.SIZE)
        return State.PERMISSIONS

    def _read_permissions(self) -> State:
        byte = self._read_byte(Field.PERMISSIONS)
        if byte is None:
            return State.DONE
        if byte == SPACE:
            raise EmptyPermissions(field=Field.PERMISSIONS, offset=self.offset)

        while byte != SPACE:
            if not self.config.grammar.accepts(byte):
                raise InvalidPermissions(field=Field.PERMISSIONS, offset=self.offset)
            self._write(bytes((byte,)), Field.PERMISSIONS)
            byte = self._expect_byte(Field.PERMISSIONS)
        self._write(COLON, Field.PERMISSIONS)
        return State.FILENAME

    def _read_filename(self) -> State:
        while (byte := self._expect_byte(Field.FILENAME)) != NULL_BYTE:
            if byte in FILENAME_DELIMITERS:
                raise InvalidFilename(field=Field.FILENAME, offset=self.offset)
            self._write(bytes((byte,)), Field.FILENAME)
        self._write(COLON, Field.FILENAME)
        return State.HASH

    def _read_hash(self) -> State:
        for _ in range(self.config.hash_length):
            byte = self._expect_byte(Field.HASH)
            self._write(binascii.hexlify(bytes((byte,))), Field.HASH)
        self._write(NEWLINE, Field.HASH)
        self.entries += 1
        logger.debug("Entry %d complete at offset %d", self.entries, self.offset)
        return State.PERMISSIONS


def decode_tree(
    reader: BinaryIO, writer: BinaryIO, config: DecoderConfig | None = None
) -> int:
    decoder = TreeDecoder(reader, writer, config or DEFAULT_CONFIG)
    return decoder.decode()


def tree_to_text(data: bytes, config: DecoderConfig | None = None) -> bytes:
    """Decode a complete binary tree record held in memory.

    Raises :class:`DecodeError` on malformed input; nothing partial is returned.
    """
    output = io.BytesIO()
    decode_tree(io.BytesIO(data), output, config)
    return output.getvalue()
