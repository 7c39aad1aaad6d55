"""Hashids codec: reversible, salted integer-to-string obfuscation.

This is obfuscation, not encryption.  The same salt, minimum length,
alphabet and prefix always yield the same string for the same numbers, and
:meth:`Hashids.decode` only accepts strings that re-encode byte for byte.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence, Tuple

from . import bigmath
from .alphabet import build_partition, shuffle
from .bigmath import BigInt
from ..domain.models import AlphabetPartition
from ..utils.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_PREFIX_SEPARATOR,
    HEX_CHUNK_LENGTH,
    LOTTERY_MODULO_OFFSET,
)
from ..utils.logging import get_logger

LOG = get_logger()

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def _hash(number: BigInt, alphabet: str) -> str:
    """Render ``number`` in base ``len(alphabet)``, most significant first."""
    digits: List[str] = []
    alphabet_length = len(alphabet)
    while True:
        digits.append(alphabet[bigmath.to_native_int(bigmath.mod(number, alphabet_length))])
        number = bigmath.divide(number, alphabet_length)
        if bigmath.compare(number, 0) == 0:
            break
    return "".join(reversed(digits))


def _unhash(segment: str, alphabet: str) -> BigInt:
    """Inverse of :func:`_hash`; raises ``ValueError`` on foreign characters."""
    number: BigInt = 0
    alphabet_length = len(alphabet)
    for char in segment:
        position = alphabet.index(char)
        number = bigmath.add(bigmath.multiply(number, alphabet_length), position)
    return number


def _step_salt(lottery: str, salt: bytes, alphabet: str) -> bytes:
    """Byte-level ``(lottery + salt + alphabet)`` cut to the alphabet length."""
    alphabet_bytes = alphabet.encode("utf-8")
    return (lottery.encode("utf-8") + salt + alphabet_bytes)[: len(alphabet_bytes)]


def _split(text: str, delimiters: str) -> List[str]:
    if not delimiters:
        return [text]
    return re.split("[" + re.escape(delimiters) + "]", text)


class Hashids:
    """Encode non-negative integers into short salted strings and back.

    The alphabet partition is computed once in the constructor and never
    mutated afterwards; every call reshuffles local copies, so one instance
    may be shared between threads.
    """

    def __init__(
        self,
        salt: str = "",
        min_length: int = 0,
        alphabet: str = DEFAULT_ALPHABET,
        prefix: Optional[str] = None,
        *,
        prefix_separator: str = DEFAULT_PREFIX_SEPARATOR,
    ) -> None:
        try:
            min_length = int(min_length)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"min_length must be an integer (got {min_length!r})") from exc
        if min_length < 0:
            raise ValueError(f"min_length must be >= 0 (got {min_length})")
        self._salt = salt
        self._salt_bytes = salt.encode("utf-8")
        self._min_length = min_length
        self._prefix = prefix
        self._prefix_separator = prefix_separator
        self._partition = build_partition(salt, alphabet)

    @property
    def salt(self) -> str:
        return self._salt

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def prefix(self) -> Optional[str]:
        return self._prefix

    @property
    def prefix_separator(self) -> str:
        return self._prefix_separator

    @property
    def partition(self) -> AlphabetPartition:
        return self._partition

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(min_length={self._min_length!r}, "
            f"prefix={self._prefix!r}, alphabet_size={len(self._partition.alphabet)})"
        )

    def _with_prefix(self, body: str) -> str:
        if self._prefix is None:
            return body
        return f"{self._prefix}{self._prefix_separator}{body}"

    def encode(self, numbers: Iterable[BigInt]) -> str:
        """Encode ``numbers`` into a hash string.

        Empty input, negative values and anything that is not an ``int`` or a
        decimal digit string produce the bare prefix (or ``""``) instead of
        raising.
        """
        values: Sequence[BigInt] = tuple(numbers)
        if not values:
            return self._with_prefix("")
        if not all(bigmath.is_canonical(value) for value in values):
            LOG.debug("encode rejected non-canonical input: %r", values)
            return self._with_prefix("")

        alphabet = self._partition.alphabet
        seps = self._partition.seps
        guards = self._partition.guards

        numbers_hash = 0
        for i, number in enumerate(values):
            numbers_hash += bigmath.to_native_int(
                bigmath.mod(number, i + LOTTERY_MODULO_OFFSET)
            )

        lottery = alphabet[numbers_hash % len(alphabet)]
        encoded = lottery
        last_index = len(values) - 1
        for i, number in enumerate(values):
            alphabet = shuffle(alphabet, _step_salt(lottery, self._salt_bytes, alphabet))
            last = _hash(number, alphabet)
            encoded += last

            if i < last_index:
                number = bigmath.mod(number, ord(last[0]) + i)
                encoded += seps[bigmath.to_native_int(bigmath.mod(number, len(seps)))]

        if len(encoded) < self._min_length:
            guard_index = (numbers_hash + ord(encoded[0])) % len(guards)
            encoded = guards[guard_index] + encoded

            if len(encoded) < self._min_length:
                guard_index = (numbers_hash + ord(encoded[2])) % len(guards)
                encoded += guards[guard_index]

        half_length = len(alphabet) // 2
        while len(encoded) < self._min_length:
            alphabet = shuffle(alphabet, alphabet)
            encoded = alphabet[half_length:] + encoded + alphabet[:half_length]

            excess = len(encoded) - self._min_length
            if excess > 0:
                start = excess // 2
                encoded = encoded[start : start + self._min_length]

        return self._with_prefix(encoded)

    def decode_all(self, hashid: str) -> Tuple[BigInt, ...]:
        """Decode every number contained in ``hashid``.

        Returns ``()`` when the string is malformed, carries the wrong prefix,
        or does not re-encode to exactly the same string.  Values above the
        native integer range come back as decimal strings.
        """
        if not isinstance(hashid, str):
            return ()

        body = hashid
        if self._prefix is not None:
            head = self._prefix + self._prefix_separator
            if not body.startswith(head):
                LOG.debug("decode rejected %r: missing prefix %r", hashid, head)
                return ()
            body = body[len(head) :]
        if not body:
            return ()

        parts = _split(body, self._partition.guards)
        breakdown = parts[1] if len(parts) in (2, 3) else parts[0]
        if not breakdown:
            return ()

        lottery = breakdown[0]
        alphabet = self._partition.alphabet
        values: List[BigInt] = []
        try:
            for segment in _split(breakdown[1:], self._partition.seps):
                alphabet = shuffle(alphabet, _step_salt(lottery, self._salt_bytes, alphabet))
                values.append(_unhash(segment, alphabet))
        except ValueError:
            LOG.debug("decode rejected %r: character outside alphabet", hashid)
            return ()

        if self.encode(values) != hashid:
            LOG.debug("decode rejected %r: round-trip mismatch", hashid)
            return ()
        return tuple(values)

    def decode(self, hashid: str) -> Optional[BigInt]:
        """Decode ``hashid`` and return only its first number (``None`` if invalid)."""
        values = self.decode_all(hashid)
        if not values:
            return None
        return values[0]

    def encode_hex(self, hex_string: str) -> str:
        """Encode a hexadecimal string; returns ``""`` for non-hex input."""
        if not isinstance(hex_string, str) or not _HEX_RE.fullmatch(hex_string):
            return ""
        numbers = [
            int("1" + hex_string[start : start + HEX_CHUNK_LENGTH], 16)
            for start in range(0, len(hex_string), HEX_CHUNK_LENGTH)
        ]
        return self.encode(numbers)

    def decode_hex(self, hashid: str) -> str:
        """Decode a hash produced by :meth:`encode_hex`.

        Digits always come back lowercase, so the round trip is exact for
        lowercase input and case-insensitive otherwise.
        """
        return "".join(
            format(bigmath.to_native_int(value), "x")[1:] for value in self.decode_all(hashid)
        )


__all__ = ["Hashids"]
