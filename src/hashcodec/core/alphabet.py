"""Salted shuffling and the alphabet/separator/guard partition."""
from __future__ import annotations

import math
from typing import Union

from ..domain.models import AlphabetPartition
from ..utils.constants import (
    DEFAULT_SEPS,
    GUARD_DIV,
    MIN_ALPHABET_LENGTH,
    MIN_DATA_ALPHABET_LENGTH,
    SEP_DIV,
)
from ..utils.errors import InvalidAlphabet


def shuffle(sequence: str, salt: Union[str, bytes]) -> str:
    """Return ``sequence`` permuted deterministically by ``salt``.

    A ``str`` salt is consumed as its UTF-8 bytes.  A single backward pass
    swaps position ``i`` with ``(salt[v] + v + p) % i`` where ``v`` cycles
    through the salt bytes and ``p`` accumulates the byte values consumed so
    far.  The modulo base is ``i`` (not ``i + 1``), so this is not a uniform
    Fisher-Yates shuffle, but it must stay exactly like this for outputs to
    remain compatible.
    """
    if not salt:
        return sequence

    if isinstance(salt, str):
        salt = salt.encode("utf-8")
    chars = list(sequence)
    salt_length = len(salt)
    v = 0
    p = 0
    for i in range(len(chars) - 1, 0, -1):
        v %= salt_length
        code = salt[v]
        p += code
        j = (code + v + p) % i
        chars[i], chars[j] = chars[j], chars[i]
        v += 1
    return "".join(chars)


def unique_characters(alphabet: str) -> str:
    return "".join(dict.fromkeys(alphabet))


def build_partition(salt: str, alphabet: str) -> AlphabetPartition:
    """Split ``alphabet`` into data alphabet, separators and guards.

    Raises :class:`InvalidAlphabet` when the de-duplicated alphabet has fewer
    than ten characters, contains a space, or leaves fewer than two characters
    to render digits with.
    """
    alphabet = unique_characters(alphabet)
    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise InvalidAlphabet(
            f"Alphabet must contain at least {MIN_ALPHABET_LENGTH} unique characters."
        )
    if " " in alphabet:
        raise InvalidAlphabet("Alphabet can't contain spaces.")

    seps = "".join(c for c in DEFAULT_SEPS if c in alphabet)
    alphabet = "".join(c for c in alphabet if c not in DEFAULT_SEPS)
    seps = shuffle(seps, salt)

    if not seps or len(alphabet) / len(seps) > SEP_DIV:
        seps_length = math.ceil(len(alphabet) / SEP_DIV)
        if seps_length > len(seps):
            diff = seps_length - len(seps)
            seps += alphabet[:diff]
            alphabet = alphabet[diff:]

    alphabet = shuffle(alphabet, salt)
    guard_count = math.ceil(len(alphabet) / GUARD_DIV)

    if len(alphabet) < 3:
        guards = seps[:guard_count]
        seps = seps[guard_count:]
    else:
        guards = alphabet[:guard_count]
        alphabet = alphabet[guard_count:]

    if len(alphabet) < MIN_DATA_ALPHABET_LENGTH:
        raise InvalidAlphabet(
            "Alphabet leaves too few characters outside the separator set "
            f"(got {len(alphabet)}, need at least {MIN_DATA_ALPHABET_LENGTH})."
        )

    return AlphabetPartition(alphabet=alphabet, seps=seps, guards=guards)


__all__ = ["build_partition", "shuffle", "unique_characters"]
