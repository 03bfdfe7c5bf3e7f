"""The processor: registers, clock and instruction execution."""

from dataclasses import dataclass, field

from gbcemu.bits import split, unsigned_16
from gbcemu.instructions import Instruction, decode
from gbcemu.memory import Memory

CLOCK = 8.388608

_FLAG_Z = 0x80
_FLAG_N = 0x40
_FLAG_H = 0x20
_FLAG_C = 0x10


@dataclass
class Registers:
    """CPU registers with their power-on values."""

    a: int = 0x01
    f: int = 0xB0
    b: int = 0x00
    c: int = 0x13
    d: int = 0x00
    e: int = 0xD8
    h: int = 0x01
    l: int = 0x4D  # noqa: E741
    pc: int = 0x0100
    sp: int = 0xFFFE

    def set_flags(self, z=None, n=None, h=None, c=None) -> None:
        """Set or clear flags in F; a flag given as None is left as it is."""
        for value, mask in ((z, _FLAG_Z), (n, _FLAG_N), (h, _FLAG_H), (c, _FLAG_C)):
            if value is None:
                continue
            self.f = self.f | mask if value else self.f & ~mask & 0xFF

    @property
    def af(self) -> int:
        return unsigned_16(self.f, self.a)

    @af.setter
    def af(self, value: int) -> None:
        self.f, self.a = split(value)

    @property
    def bc(self) -> int:
        return unsigned_16(self.c, self.b)

    @bc.setter
    def bc(self, value: int) -> None:
        self.c, self.b = split(value)

    @property
    def de(self) -> int:
        return unsigned_16(self.e, self.d)

    @de.setter
    def de(self, value: int) -> None:
        self.e, self.d = split(value)

    @property
    def hl(self) -> int:
        return unsigned_16(self.l, self.h)

    @hl.setter
    def hl(self, value: int) -> None:
        self.l, self.h = split(value)


@dataclass
class Clock:
    """Counts machine cycles spent."""

    cycles: int = 0
    clock_speed: int = field(default=int(CLOCK))


class CPU:
    """Fetches, decodes and executes instructions from memory."""

    def __init__(self, memory: Memory) -> None:
        self.memory = memory
        self.registers = Registers()
        self.clock = Clock()
        self._handlers = {
            Instruction.NOP: self._nop,
            Instruction.LD_B_u8: self._ld_b_u8,
            Instruction.LD_C_u8: self._ld_c_u8,
            Instruction.LD_BC_u16: self._ld_bc_u16,
            Instruction.LD_BC_A: self._ld_bc_a,
            Instruction.LD_D_u8: self._ld_d_u8,
            Instruction.LD_E_u8: self._ld_e_u8,
            Instruction.LD_DE_u16: self._ld_de_u16,
            Instruction.LD_DE_A: self._ld_de_a,
            Instruction.INC_E: self._inc_e,
        }

    def fetch(self) -> int:
        """Read the byte at PC and advance PC."""
        data = self.memory.read(self.registers.pc)
        self.registers.pc = (self.registers.pc + 1) & 0xFFFF
        return data

    def _fetch_u16(self) -> int:
        lsb = self.fetch()
        msb = self.fetch()
        return unsigned_16(lsb, msb)

    def execute(self, instruction: Instruction) -> None:
        """Carry out one decoded instruction; unsupported ones do nothing."""
        handler = self._handlers.get(instruction)
        if handler is not None:
            handler()

    def step(self) -> Instruction:
        """Fetch, decode and execute one instruction and return it."""
        instruction = decode(self.fetch())
        self.execute(instruction)
        return instruction

    def run(self, max_steps=None) -> int:
        """Execute instructions, forever or up to ``max_steps``; return the count."""
        steps = 0
        while max_steps is None or steps < max_steps:
            self.step()
            steps += 1
        return steps

    def _nop(self) -> None:
        self.clock.cycles += 1

    def _ld_b_u8(self) -> None:
        self.registers.b = self.fetch()
        self.clock.cycles += 2

    def _ld_c_u8(self) -> None:
        self.registers.c = self.fetch()
        self.clock.cycles += 2

    def _ld_bc_u16(self) -> None:
        self.registers.bc = self._fetch_u16()
        self.clock.cycles += 3

    def _ld_bc_a(self) -> None:
        self.memory.write(self.registers.bc, self.registers.a)
        self.clock.cycles += 2

    def _ld_d_u8(self) -> None:
        self.registers.d = self.fetch()
        self.clock.cycles += 2

    def _ld_e_u8(self) -> None:
        self.registers.e = self.fetch()
        self.clock.cycles += 2

    def _ld_de_u16(self) -> None:
        self.registers.de = self._fetch_u16()
        self.clock.cycles += 3

    def _ld_de_a(self) -> None:
        self.memory.write(self.registers.de, self.registers.a)
        self.clock.cycles += 2

    def _inc_e(self) -> None:
        regs = self.registers
        if regs.e == 0xFF:
            regs.e = 0x00
            regs.set_flags(z=True, n=False, h=True)
        else:
            regs.e += 1
            regs.set_flags(n=False)
        self.clock.cycles += 1