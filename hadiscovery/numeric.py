"""Fixed-point numbers carried as an integer base value and a decimal precision."""

from __future__ import annotations

import struct

_INT64_MASK = (1 << 64) - 1


def _wrap_signed(value: int, bits: int) -> int:
    """Truncate ``value`` to a two's complement integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _to_float32(value: float) -> float:
    """Round ``value`` to the nearest single precision float."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


class Numeric:
    """A number stored as an integer base value scaled by ``10 ** precision``.

    For example, ``123.4`` with precision ``1`` has the base value ``1234``.
    A number created without a value is "unset".
    """

    MAX_DIGITS = 19
    """The maximum number of digits the base value may have."""

    __slots__ = ("_is_set", "_value", "_precision")

    def __init__(self, value: float | int | None = None, precision: int = 0) -> None:
        self._is_set = value is not None
        self._precision = precision if value is not None else 0
        if value is None:
            self._value = 0
        elif isinstance(value, float):
            scaled = _to_float32(_to_float32(value) * self.precision_base())
            self._value = int(scaled)
        else:
            self._value = int(value) * self.precision_base()

    @classmethod
    def from_str(cls, data: bytes | str) -> Numeric:
        """Parse a base value (an optionally signed run of digits).

        The result has precision zero; an empty, too long or malformed
        input gives an unset number.
        """
        text = data.decode("ascii", "replace") if isinstance(data, (bytes, bytearray)) else data
        if not text:
            return cls()

        negative = text.startswith("-")
        digits = text[1:] if negative else text
        if len(digits) > cls.MAX_DIGITS:
            return cls()
        if any(ch not in "0123456789" for ch in digits):
            return cls()

        magnitude = int(digits) if digits else 0
        result = cls()
        result.set_base_value(_wrap_signed(-magnitude if negative else magnitude, 64))
        return result

    @property
    def is_set(self) -> bool:
        """True if the number holds a value."""
        return self._is_set

    @property
    def base_value(self) -> int:
        """The integer base value, not scaled back by the precision."""
        return self._value

    @property
    def precision(self) -> int:
        """The number of digits in the decimal part."""
        return self._precision

    @precision.setter
    def precision(self, precision: int) -> None:
        self._precision = precision

    def precision_base(self) -> int:
        """Return the multiplier that turns a value into its base value."""
        return {1: 10, 2: 100, 3: 1000}.get(self._precision, 1)

    def calculate_size(self) -> int:
        """Return the length of the textual form, or 0 for an unset number."""
        if not self._is_set:
            return 0
        return len(self.to_str())

    def to_str(self) -> str:
        """Return the decimal representation; an unset number reads ``0``."""
        if not self._is_set or self._value == 0:
            return "0"
        sign = "-" if self._value < 0 else ""
        magnitude = abs(self._value)
        if self._precision <= 0:
            return f"{sign}{magnitude}"
        whole, fraction = divmod(magnitude, 10**self._precision)
        return f"{sign}{whole}.{fraction:0{self._precision}d}"

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        if not self._is_set:
            return "Numeric()"
        return f"Numeric(base_value={self._value}, precision={self._precision})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Numeric):
            return NotImplemented
        return (
            self._is_set == other._is_set
            and self._value == other._value
            and self._precision == other._precision
        )

    __hash__ = None  # type: ignore[assignment]

    def set_base_value(self, value: int) -> None:
        """Set the base value as is, without scaling it by the precision."""
        self._is_set = True
        self._value = value

    def reset(self) -> None:
        """Return the number to the unset state."""
        self._is_set = False
        self._value = 0
        self._precision = 0

    def _is_integer_within(self, low: int, high: int) -> bool:
        return self._is_set and self._precision == 0 and low <= self._value <= high

    def is_uint8(self) -> bool:
        return self._is_integer_within(0, 0xFF)

    def is_uint16(self) -> bool:
        return self._is_integer_within(0, 0xFFFF)

    def is_uint32(self) -> bool:
        return self._is_integer_within(0, 0xFFFFFFFF)

    def is_int8(self) -> bool:
        return self._is_integer_within(-(1 << 7), (1 << 7) - 1)

    def is_int16(self) -> bool:
        return self._is_integer_within(-(1 << 15), (1 << 15) - 1)

    def is_int32(self) -> bool:
        return self._is_integer_within(-(1 << 31), (1 << 31) - 1)

    def is_float(self) -> bool:
        return self._is_set and self._precision > 0

    def to_uint8(self) -> int:
        return self._value & 0xFF

    def to_uint16(self) -> int:
        return self._value & 0xFFFF

    def to_uint32(self) -> int:
        return self._value & 0xFFFFFFFF

    def to_int8(self) -> int:
        return _wrap_signed(self._value, 8)

    def to_int16(self) -> int:
        return _wrap_signed(self._value, 16)

    def to_int32(self) -> int:
        return _wrap_signed(self._value, 32)

    def to_float(self) -> float:
        """Return the value scaled back by the precision."""
        return self._value / self.precision_base()