"""32-bit wrapping sequence numbers relative to an initial sequence number."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_DIST32 = 1 << 32

__all__ = ["WrappingInt32", "wrap", "unwrap"]


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer that wraps around, such as a TCP seqno or ackno.

    Values outside the 32-bit range are reduced modulo 2**32.
    """

    raw_value: int

    def __post_init__(self) -> None:
        if not isinstance(self.raw_value, int) or isinstance(self.raw_value, bool):
            raise TypeError(f"raw_value must be an int, not {type(self.raw_value).__name__}")
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    def __add__(self, other: int) -> WrappingInt32:
        """The point ``other`` steps past this one."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other):
        """Signed offset to another WrappingInt32, or the point ``other`` steps before."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK32
            return diff - _DIST32 if diff >= 1 << 31 else diff
        if isinstance(other, int) and not isinstance(other, bool):
            return WrappingInt32(self.raw_value - other)
        return NotImplemented

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a WrappingInt32."""
    return WrappingInt32((n + isn.raw_value) % _DIST32)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to ``n`` and is closest to ``checkpoint``."""
    checkpoint &= _MASK64
    offset = (n.raw_value - isn.raw_value) & _MASK32
    res = ((checkpoint & 0xFFFFFFFF00000000) + offset) & _MASK64
    if checkpoint > res:
        if ((res + _DIST32 - checkpoint) & _MASK64) < checkpoint - res:
            res = (res + _DIST32) & _MASK64
    elif res > _DIST32 and ((checkpoint + _DIST32 - res) & _MASK64) < res - checkpoint:
        res -= _DIST32
    return res