"""Helpers for combining and splitting 8-bit and 16-bit values."""

KIB = 1024


def _check_byte(value: int, name: str) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in 8 bits, got {value!r}")


def unsigned_16(lsb: int, msb: int) -> int:
    """Combine a low byte and a high byte into a 16-bit value."""
    _check_byte(lsb, "lsb")
    _check_byte(msb, "msb")
    return lsb | (msb << 8)


def split(value: int) -> tuple[int, int]:
    """Split a 16-bit value into its (lsb, msb) bytes."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"value must fit in 16 bits, got {value!r}")
    return value & 0xFF, value >> 8