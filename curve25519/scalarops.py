"""Operations over collections of scalars, plus random and hash-derived scalars."""

from __future__ import annotations

import hashlib
import secrets
from collections.abc import Callable, Iterable
from typing import Any, Protocol

from curve25519.scalar import L, Scalar

_WIDE_BYTES = 64


class _Digest(Protocol):
    def digest(self) -> bytes: ...


class _RandomBytes(Protocol):
    def randbytes(self, n: int) -> bytes: ...


def batch_invert(scalars: Iterable[Scalar]) -> tuple[list[Scalar], Scalar]:
    """Invert every scalar using a single modular inversion.

    Returns the list of inverses, in input order, together with the
    product of all the inverses.  Every input must be nonzero; a zero
    input raises ValueError.
    """
    items = list(scalars)
    prefixes: list[int] = []
    acc = 1
    for item in items:
        prefixes.append(acc)
        acc = (acc * int(item)) % L

    if acc == 0:
        raise ValueError("cannot batch-invert a collection containing zero")

    acc = pow(acc, L - 2, L)
    all_inverses = Scalar(acc)

    inverses: list[Scalar] = []
    for item, prefix in zip(reversed(items), reversed(prefixes)):
        inverses.append(Scalar((acc * prefix) % L))
        acc = (acc * int(item)) % L
    inverses.reverse()
    return inverses, all_inverses


def scalar_sum(scalars: Iterable[Scalar]) -> Scalar:
    """Sum scalars modulo l; the empty sum is zero."""
    total = Scalar.zero()
    for item in scalars:
        total = total + item
    return total


def scalar_product(scalars: Iterable[Scalar]) -> Scalar:
    """Multiply scalars modulo l; the empty product is one."""
    total = Scalar.one()
    for item in scalars:
        total = total * item
    return total


def random_scalar(rng: _RandomBytes | None = None) -> Scalar:
    """Return a uniformly random scalar.

    Draws 64 bytes from ``rng.randbytes`` (or from the operating system's
    secure source when no generator is given) and reduces them modulo l.
    """
    data = secrets.token_bytes(_WIDE_BYTES) if rng is None else rng.randbytes(_WIDE_BYTES)
    return Scalar.from_bytes_mod_order_wide(data)


def scalar_from_hash(digest: _Digest) -> Scalar:
    """Build a scalar from a hash object whose output is 64 bytes."""
    output = digest.digest()
    if len(output) != _WIDE_BYTES:
        raise ValueError(f"hash output must be {_WIDE_BYTES} bytes, got {len(output)}")
    return Scalar.from_bytes_mod_order_wide(output)


def hash_to_scalar(
    data: bytes, hasher: Callable[[], Any] = hashlib.sha512
) -> Scalar:
    """Hash bytes with a 64-byte-output hash constructor and reduce to a scalar."""
    digest = hasher()
    digest.update(bytes(data))
    return scalar_from_hash(digest)