"""Number extraction from a whitespace-delimited byte stream.

The stream is scanned one byte at a time and each run of non-whitespace
bytes is classified by its first byte:

- ``-``: always rejected. A numeric-looking run (``-12.5``) is logged as a
  rejected negative number; anything else (``-abc``, a lone ``-``) is
  malformed input and stops extraction.
- ``0``: the whole run is one token. It is accepted when its permissive
  value is > 0, or when it is a decimal literal (``0.00`` -> 0.0). Bare
  ``0`` is rejected.
- ``1``-``9``: digits and points are copied until the first letter; letters
  after that are skipped (``12abc`` -> 12). The byte that ends the run is
  consumed as a separator, so ``12,13`` yields 12 and 13.
- anything else: the whole run must have a permissive value > 0 (``.5``,
  ``+3``), otherwise it is malformed input and stops extraction.

Values that overflow to infinity (or spell it, ``inf``) are rejected in
every branch; ``nan`` is malformed.

Typical usage:
>>> from nbstats.tokenizer import extract_from_text
>>> extract_from_text("-5 10").values
array([10.])
"""
from __future__ import annotations

import enum
import io
import logging
import math
import re
from dataclasses import dataclass
from typing import BinaryIO, Optional, Tuple

import numpy as np

from config import get_int_setting

from .buffers import GrowableArray
from .errors import EmptyInputError, MalformedTokenError, RejectedTokenWarning, StreamIOError

logger = logging.getLogger(__name__)

EOF = -1
# Ctrl-Z, the interactive end-of-input marker on Windows consoles
CTRL_Z = 0x1A

_DIGITS = frozenset(b"0123456789")
_SPACE = frozenset(b" \t\n\r\x0b\x0c")
_ALPHA = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
_DOT = ord(".")
_MINUS = ord("-")
_ZERO = ord("0")

# Longest decimal prefix, or an inf/nan spelling, as atof() would read it
_PREFIX_RE = re.compile(
    r"[ \t\n\r\x0b\x0c]*([+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|(?i:inf(?:inity)?|nan)))"
)
_FRACTION_RE = re.compile(r"[+-]?[0-9]*\.[0-9]+")


def permissive_float(text: str) -> float:
    """Parse the longest decimal prefix of ``text``; 0.0 when nothing parses.

    Examples:
        "12.5abc" -> 12.5
        ".5" -> 0.5
        "abc" -> 0.0
        "1e999" -> inf
        "Infinity" -> inf
    """
    m = _PREFIX_RE.match(text)
    if not m:
        return 0.0
    return float(m.group(1))


def is_decimal_literal(text: str) -> bool:
    """True when the parsed prefix of ``text`` has a fractional part (``0.00``)."""
    m = _PREFIX_RE.match(text)
    if not m:
        return False
    return _FRACTION_RE.match(m.group(1)) is not None


class RejectionReason(enum.Enum):
    NEGATIVE = "negative number"
    ZERO = "bare zero"
    INFINITY = "non-finite value"


@dataclass(frozen=True)
class RejectionEvent:
    """A token excluded from the dataset. ``index`` is the element position."""

    index: int
    text: str
    reason: RejectionReason

    @property
    def message(self) -> str:
        if self.reason is RejectionReason.INFINITY:
            return f"rejected #{self.index} <{self.text}> = INFINITY"
        return f"rejected #{self.index} <{self.text}>"


@dataclass(frozen=True)
class ExtractionResult:
    values: np.ndarray
    rejections: Tuple[RejectionEvent, ...] = ()

    def __len__(self) -> int:
        return int(self.values.shape[0])


class ByteReader:
    """Chunked byte reader returning ints, with EOF as -1.

    ``eof_marker`` is a byte value that ends the input early (Ctrl-Z on an
    interactive console). Streams exposing ``read1`` are read with it so an
    interactive stdin does not block waiting for a full chunk.
    """

    def __init__(self, stream: BinaryIO, chunk_size: Optional[int] = None, eof_marker: Optional[int] = None):
        self._read = getattr(stream, "read1", None) or stream.read
        self._chunk_size = chunk_size or get_int_setting("NBSTATS_CHUNK_SIZE", 64 * 1024, minimum=1)
        self._eof_marker = eof_marker
        self._buf = b""
        self._pos = 0
        self._eof = False

    def getc(self) -> int:
        if self._pos >= len(self._buf):
            if self._eof:
                return EOF
            try:
                chunk = self._read(self._chunk_size)
            except OSError as exc:
                raise StreamIOError(f"read failed: {exc}") from exc
            if isinstance(chunk, str):
                chunk = chunk.encode("latin-1", "replace")
            if not chunk:
                self._eof = True
                return EOF
            self._buf = chunk
            self._pos = 0
        ch = self._buf[self._pos]
        self._pos += 1
        if ch == self._eof_marker:
            self._eof = True
            self._buf = b""
            self._pos = 0
            return EOF
        return ch


class Tokenizer:
    """Classifies the runs of a byte stream into accepted values and rejections."""

    def __init__(self, reader: ByteReader, *, strict: bool = False, capacity: Optional[int] = None):
        cap = capacity or get_int_setting("NBSTATS_INITIAL_CAPACITY", 4, minimum=1)
        self._reader = reader
        self._strict = strict
        self._chars = GrowableArray(np.uint8, cap)
        self._values = GrowableArray(np.float64, cap)
        self._rejections: list[RejectionEvent] = []
        # accepted values plus overflow placeholders
        self._position = 0

    def run(self) -> ExtractionResult:
        getc = self._reader.getc
        ch = getc()
        while ch != EOF:
            if ch == _MINUS:
                self._negative_led()
            elif ch == _ZERO:
                self._zero_led()
            elif ch in _DIGITS:
                self._digit_led(ch)
            elif ch not in _SPACE:
                self._symbol_led(ch)
            ch = getc()

        if len(self._values) == 0:
            raise EmptyInputError()
        logger.debug("accepted %d values, rejected %d tokens", len(self._values), len(self._rejections))
        return ExtractionResult(values=self._values.freeze(), rejections=tuple(self._rejections))

    # -- branches -----------------------------------------------------------

    def _negative_led(self) -> None:
        chars = self._chars
        chars.clear()
        chars.append(_MINUS)
        ch = self._reader.getc()
        if ch in _DIGITS or ch == _DOT:
            while ch in _DIGITS or ch == _DOT:
                chars.append(ch)
                ch = self._reader.getc()
            self._reject(chars.to_text(), RejectionReason.NEGATIVE)
            return
        while ch != EOF and ch not in _SPACE:
            chars.append(ch)
            ch = self._reader.getc()
        raise MalformedTokenError(self._position, chars.to_text())

    def _zero_led(self) -> None:
        text = self._take_run(_ZERO)
        value = permissive_float(text)
        if not math.isfinite(value):
            self._reject(text, RejectionReason.INFINITY)
        elif value > 0 or is_decimal_literal(text):
            self._accept(value)
        else:
            self._reject(text, RejectionReason.ZERO)

    def _digit_led(self, first: int) -> None:
        chars = self._chars
        chars.clear()
        truncated = False
        ch = first
        while ch in _DIGITS or ch == _DOT or ch in _ALPHA:
            if not truncated and ch not in _ALPHA:
                chars.append(ch)
            else:
                truncated = True
            ch = self._reader.getc()
        text = chars.to_text()
        value = permissive_float(text)
        if math.isfinite(value):
            self._accept(value)
        else:
            self._reject(text, RejectionReason.INFINITY)

    def _symbol_led(self, first: int) -> None:
        text = self._take_run(first)
        value = permissive_float(text)
        # nan fails the > 0 test below and stays malformed
        if math.isinf(value):
            self._reject(text, RejectionReason.INFINITY)
        elif value > 0:
            self._accept(value)
        else:
            raise MalformedTokenError(self._position, text)

    # -- helpers ------------------------------------------------------------

    def _take_run(self, first: int) -> str:
        chars = self._chars
        chars.clear()
        chars.append(first)
        ch = self._reader.getc()
        while ch != EOF and ch not in _SPACE:
            chars.append(ch)
            ch = self._reader.getc()
        return chars.to_text()

    def _accept(self, value: float) -> None:
        self._values.append(value)
        self._position += 1

    def _reject(self, text: str, reason: RejectionReason) -> None:
        event = RejectionEvent(self._position, text, reason)
        if reason is RejectionReason.INFINITY:
            self._position += 1
        self._rejections.append(event)
        logger.warning(event.message)
        if self._strict:
            raise RejectedTokenWarning(event)


def extract_numbers(
    stream: BinaryIO,
    *,
    eof_marker: Optional[int] = None,
    strict: bool = False,
    chunk_size: Optional[int] = None,
) -> ExtractionResult:
    """Extract accepted values and rejection events from a binary stream.

    Raises MalformedTokenError on unrecoverable input, EmptyInputError when
    nothing was accepted, and RejectedTokenWarning on the first rejection
    when ``strict`` is set.
    """
    reader = ByteReader(stream, chunk_size=chunk_size, eof_marker=eof_marker)
    return Tokenizer(reader, strict=strict).run()


def extract_from_text(text: str, **kwargs) -> ExtractionResult:
    return extract_numbers(io.BytesIO(text.encode("latin-1", "replace")), **kwargs)
