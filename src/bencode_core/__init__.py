"""bencode_core: canonical bencode encoder and strict decoder."""

from .cursor import ByteCursor
from .decoder import DEFAULT_MAX_DEPTH, Decoder, decode, iter_decode, read
from .encoder import encode, write
from .errors import (
    BadType,
    BencodeError,
    DecodeError,
    DecodeIOError,
    HelperError,
    IntegerOverflow,
    MalformedText,
    MissingKey,
    NestingTooDeep,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
)
from .helpers import (
    pop_value_bytestring,
    pop_value_bytestring_option,
    pop_value_integer,
    pop_value_integer_option,
    pop_value_utf8_string,
    pop_value_utf8_string_option,
)
from .values import INT64_MAX, INT64_MIN, Value, VDict, VInteger, VList, VString

__all__ = [
    "decode",
    "read",
    "iter_decode",
    "encode",
    "write",
    "Decoder",
    "ByteCursor",
    "DEFAULT_MAX_DEPTH",
    "Value",
    "VString",
    "VInteger",
    "VList",
    "VDict",
    "INT64_MIN",
    "INT64_MAX",
    "BencodeError",
    "DecodeError",
    "UnexpectedEndOfInput",
    "DecodeIOError",
    "UnexpectedCharacter",
    "IntegerOverflow",
    "NestingTooDeep",
    "HelperError",
    "MissingKey",
    "BadType",
    "MalformedText",
    "pop_value_integer",
    "pop_value_integer_option",
    "pop_value_bytestring",
    "pop_value_bytestring_option",
    "pop_value_utf8_string",
    "pop_value_utf8_string_option",
]
