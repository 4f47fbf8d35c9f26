"""Arithmetic in the prime field GF(2^255 - 19)."""

from __future__ import annotations

from collections.abc import Iterable

P = 2**255 - 19
"""The field modulus."""

_P58_EXPONENT = (P - 5) // 8
_INVERT_EXPONENT = P - 2
_LOW_255_BITS = (1 << 255) - 1


class FieldElement:
    """An immutable element of Z / (2^255 - 19).

    Values are kept reduced, so equality and hashing follow field
    equality.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = value % P

    # ------------------------------------------------------------------
    # Construction and encoding
    # ------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, data: bytes) -> FieldElement:
        """Decode 32 little-endian bytes, ignoring the high bit, reducing mod p."""
        raw = bytes(data)
        if len(raw) != 32:
            raise ValueError(f"field element encoding must be 32 bytes, got {len(raw)}")
        return cls(int.from_bytes(raw, "little") & _LOW_255_BITS)

    def to_bytes(self) -> bytes:
        """Return the canonical 32-byte little-endian encoding."""
        return self._value.to_bytes(32, "little")

    @classmethod
    def zero(cls) -> FieldElement:
        return cls(0)

    @classmethod
    def one(cls) -> FieldElement:
        return cls(1)

    @classmethod
    def minus_one(cls) -> FieldElement:
        return cls(-1)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self._value + other._value)

    def __sub__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self._value - other._value)

    def __mul__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self._value * other._value)

    def __neg__(self) -> FieldElement:
        return FieldElement(-self._value)

    def square(self) -> FieldElement:
        """Return self^2."""
        return FieldElement(self._value * self._value)

    def square2(self) -> FieldElement:
        """Return 2 * self^2."""
        return FieldElement(2 * self._value * self._value)

    def pow2k(self, k: int) -> FieldElement:
        """Square this element k times, returning self^(2^k)."""
        if k < 1:
            raise ValueError("pow2k requires k >= 1")
        return FieldElement(pow(self._value, 1 << k, P))

    def invert(self) -> FieldElement:
        """Return self^(p-2), the inverse of a nonzero element; zero maps to zero."""
        return FieldElement(pow(self._value, _INVERT_EXPONENT, P))

    def pow_p58(self) -> FieldElement:
        """Return self^((p-5)/8) = self^(2^252 - 3)."""
        return FieldElement(pow(self._value, _P58_EXPONENT, P))

    @classmethod
    def batch_invert(cls, elements: Iterable[FieldElement]) -> list[FieldElement]:
        """Invert every element using a single field inversion.

        All inputs must be nonzero.
        """
        items = list(elements)
        prefixes: list[FieldElement] = []
        acc = cls.one()
        for element in items:
            prefixes.append(acc)
            acc = acc * element

        acc = acc.invert()

        inverses: list[FieldElement] = []
        for element, prefix in zip(reversed(items), reversed(prefixes)):
            inverses.append(acc * prefix)
            acc = acc * element
        inverses.reverse()
        return inverses

    # ------------------------------------------------------------------
    # Predicates and conditional operations
    # ------------------------------------------------------------------

    def is_negative(self) -> bool:
        """True if the low bit of the canonical encoding is set."""
        return bool(self._value & 1)

    def is_zero(self) -> bool:
        return self._value == 0

    def conditional_negate(self, choice: bool) -> FieldElement:
        """Return -self if choice is set, otherwise self."""
        return -self if choice else self

    def _select(self, other: FieldElement, choice: bool) -> FieldElement:
        return other if choice else self

    # ------------------------------------------------------------------
    # Square roots
    # ------------------------------------------------------------------

    @classmethod
    def sqrt_ratio_i(cls, u: FieldElement, v: FieldElement) -> tuple[bool, FieldElement]:
        """Compute sqrt(u/v) or sqrt(i*u/v), always the nonnegative root.

        Returns:
          (True, +sqrt(u/v)) if v is nonzero and u/v is square;
          (True, zero) if u is zero;
          (False, zero) if v is zero and u is nonzero;
          (False, +sqrt(i*u/v)) if u/v is nonsquare.
        """
        v3 = v.square() * v
        v7 = v3.square() * v
        r = (u * v3) * (u * v7).pow_p58()
        check = v * r.square()

        neg_u = -u
        correct_sign_sqrt = check == u
        flipped_sign_sqrt = check == neg_u
        flipped_sign_sqrt_i = check == neg_u * SQRT_M1

        r = r._select(SQRT_M1 * r, flipped_sign_sqrt or flipped_sign_sqrt_i)
        r = r.conditional_negate(r.is_negative())

        return correct_sign_sqrt or flipped_sign_sqrt, r

    def invsqrt(self) -> tuple[bool, FieldElement]:
        """Compute sqrt(1/self); see sqrt_ratio_i for the result cases."""
        return FieldElement.sqrt_ratio_i(FieldElement.one(), self)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("FieldElement", self._value))

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"FieldElement({self.to_bytes().hex()})"


SQRT_M1 = FieldElement(
    19681161376707505956807079304988542015446066515923890162744021073123829784752
)
"""The nonnegative square root of -1 in the field."""