from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["Grammar", "DecoderConfig", "DEFAULT_CONFIG"]

DIGITS = frozenset(b"0123456789")
DELIMITERS = frozenset(b":\n")


class Grammar(StrEnum):
    STRICT = auto()
    PERMISSIVE = auto()

    def accepts(self, byte: int) -> bool:
        """Check a size or permissions byte against the grammar."""
        match self:
            case Grammar.STRICT:
                return byte in DIGITS
            case Grammar.PERMISSIVE:
                return byte not in DELIMITERS
            case _:
                raise ValueError(f"Invalid Grammar: {self}")


@dataclass(frozen=True, kw_only=True)
class DecoderConfig:
    grammar: Grammar = Grammar.STRICT
    header: bytes = b"tree "
    hash_length: int = 20

    def __post_init__(self):
        if not isinstance(self.grammar, Grammar):
            object.__setattr__(self, "grammar", Grammar(self.grammar))
        if len(self.header) < 2 or not self.header.endswith(b" "):
            raise ValueError(f"Header must be a token followed by a space: {self.header!r}")
        if b" " in self.header[:-1] or DELIMITERS.intersection(self.header):
            raise ValueError(f"Header token must not contain spaces, ':' or newlines: {self.header!r}")
        if self.hash_length <= 0:
            raise ValueError(f"Hash length must be positive: {self.hash_length}")


DEFAULT_CONFIG = DecoderConfig()
