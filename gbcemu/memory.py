"""The addressable memory of the machine."""

from gbcemu.bits import KIB

ROM_SIZE = 32 * KIB
RAM_SIZE = 32 * KIB
ROM_END = 0x7FFF
ADDRESS_MAX = 0xFFFF


class ForbiddenWriteError(Exception):
    """Raised on a write into the read-only ROM region."""


class Memory:
    """ROM at 0x0000-0x7FFF and RAM for the rest of the address space."""

    def __init__(self, program: bytes = b"") -> None:
        if len(program) > ROM_SIZE:
            raise ValueError(f"program is too large, maximum size is {ROM_SIZE} bytes")
        self._rom = bytes(program).ljust(ROM_SIZE, b"\x00")
        self._ram = bytearray(RAM_SIZE)

    @staticmethod
    def _check_address(address: int) -> None:
        if not 0 <= address <= ADDRESS_MAX:
            raise ValueError(f"address must fit in 16 bits, got {address!r}")

    def read(self, address: int) -> int:
        """Return the byte stored at ``address``."""
        self._check_address(address)
        if address <= ROM_END:
            return self._rom[address]
        return self._ram[address - ROM_END - 1]

    def write(self, address: int, data: int) -> None:
        """Store ``data`` at ``address``; ROM cannot be written."""
        self._check_address(address)
        if not 0 <= data <= 0xFF:
            raise ValueError(f"data must fit in 8 bits, got {data!r}")
        if address <= ROM_END:
            raise ForbiddenWriteError(f"forbidden write into ROM at {address:#06x}")
        self._ram[address - ROM_END - 1] = data