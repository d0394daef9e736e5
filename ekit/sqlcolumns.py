"""Column types that convert Python values to and from database values.

Both column types expose ``value()``, which produces what is written to the
database, and ``scan(src)``, which loads what was read back. They also adapt
themselves when passed as a ``sqlite3`` query parameter.
"""

from __future__ import annotations

import json
import os
import sqlite3
import struct
from dataclasses import dataclass
from typing import Any

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

_NONCE_SIZE = 12
_KEY_SIZES = (16, 24, 32)


class ColumnError(Exception):
    """Base class for column conversion errors."""


class InvalidColumnError(ColumnError):
    """Raised when an invalid column is asked for its value."""


class KeyLengthError(ColumnError, ValueError):
    """Raised when an encryption key is not 16, 24 or 32 bytes long."""


class UnsupportedSourceError(ColumnError, TypeError):
    """Raised when ``scan`` receives a source of an unsupported type."""


def _to_json(val: Any) -> bytes:
    return json.dumps(val, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def _codec(kind: type | None) -> str:
    if kind is None or issubclass(kind, bool):
        return "json"
    if issubclass(kind, str):
        return "str"
    if issubclass(kind, (bytes, bytearray, memoryview)):
        return "bytes"
    if issubclass(kind, int):
        return "int"
    if issubclass(kind, float):
        return "float"
    return "json"


@dataclass
class EncryptColumn:
    """A column whose value is stored encrypted with AES-GCM.

    Strings are encrypted as UTF-8, bytes as they are, integers as 8-byte
    big-endian signed numbers and floats as 8-byte big-endian doubles;
    everything else is encrypted as JSON. ``kind`` selects the decoding used
    by ``scan``; when not given it is taken from the type of ``val``, and a
    column with neither decodes JSON.
    """

    key: str
    val: Any = None
    valid: bool = False
    kind: type | None = None

    def __post_init__(self) -> None:
        if self.kind is None and self.val is not None:
            self.kind = type(self.val)

    def value(self) -> bytes:
        """Return the encrypted value: a random nonce followed by the ciphertext."""
        if not self.valid:
            raise InvalidColumnError("EncryptColumn is not valid")
        cipher = self._cipher()
        nonce = os.urandom(_NONCE_SIZE)
        return nonce + cipher.encrypt(nonce, self._encode(), None)

    def scan(self, src: Any) -> None:
        """Decrypt ``src`` and load the decoded value into this column."""
        if isinstance(src, (bytes, bytearray, memoryview)):
            data = bytes(src)
        elif isinstance(src, str):
            data = src.encode("utf-8")
        else:
            raise UnsupportedSourceError(
                f"EncryptColumn.scan does not support source type {src!r}"
            )
        plain = self._decrypt(data)
        try:
            self.val = self._decode(plain)
        except Exception:
            self.valid = False
            raise
        self.valid = True

    def __conform__(self, protocol: Any) -> Any:
        if protocol is sqlite3.PrepareProtocol:
            return self.value()
        return None

    def _cipher(self) -> AESGCM:
        key = self.key.encode("utf-8")
        if len(key) not in _KEY_SIZES:
            raise KeyLengthError("EncryptColumn only supports 16, 24 or 32 byte keys")
        return AESGCM(key)

    def _decrypt(self, data: bytes) -> bytes:
        cipher = self._cipher()
        if len(data) < _NONCE_SIZE:
            raise ColumnError("encrypted data is shorter than the nonce")
        nonce, payload = data[:_NONCE_SIZE], data[_NONCE_SIZE:]
        try:
            return cipher.decrypt(nonce, payload, None)
        except InvalidTag as exc:
            raise ColumnError("decryption failed") from exc

    def _encode(self) -> bytes:
        codec = _codec(self.kind)
        if codec == "str":
            return self.val.encode("utf-8", errors="surrogateescape")
        if codec == "bytes":
            return bytes(self.val)
        if codec in ("int", "float"):
            fmt = ">q" if codec == "int" else ">d"
            try:
                return struct.pack(fmt, self.val)
            except struct.error as exc:
                raise ColumnError(f"cannot encode {self.val!r}: {exc}") from exc
        return _to_json(self.val)

    def _decode(self, data: bytes) -> Any:
        codec = _codec(self.kind)
        if codec == "str":
            return data.decode("utf-8", errors="surrogateescape")
        if codec == "bytes":
            return data
        if codec in ("int", "float"):
            fmt = ">q" if codec == "int" else ">d"
            try:
                return struct.unpack_from(fmt, data)[0]
            except struct.error as exc:
                raise ColumnError(f"cannot decode number: {exc}") from exc
        return json.loads(data)


@dataclass
class JsonColumn:
    """A column stored as a JSON document.

    An invalid column is written as NULL.
    """

    val: Any = None
    valid: bool = False

    def value(self) -> bytes | None:
        """Return the JSON encoding of ``val``, or None when not valid."""
        if not self.valid:
            return None
        return _to_json(self.val)

    def scan(self, src: Any) -> None:
        """Load a JSON document from ``src``; a None source changes nothing."""
        if src is None:
            return
        if isinstance(src, (bytes, bytearray, memoryview)):
            data: bytes | str = bytes(src)
        elif isinstance(src, str):
            data = src
        else:
            raise UnsupportedSourceError(
                f"JsonColumn.scan does not support source type {src!r}"
            )
        self.val = json.loads(data)
        self.valid = True

    def __conform__(self, protocol: Any) -> Any:
        if protocol is sqlite3.PrepareProtocol:
            return self.value()
        return None