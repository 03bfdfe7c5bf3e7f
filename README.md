# gbcemu

An early-stage core for a Game Boy Color emulator. It has these modules:

- `gbcemu.bits` joins and splits 16-bit values. `unsigned_16(lsb, msb)` combines two bytes into one value. `split(value)` returns `(lsb, msb)`. Both raise `ValueError` for an argument that is out of range.
- `gbcemu.instructions` holds the `Instruction` enum and `decode(byte)`. `decode` maps opcodes `0x00`–`0x5F` to their instructions. Any other byte decodes to `Instruction.Invalid`. A value outside `0`–`0xFF` raises `ValueError`.
- `gbcemu.memory` holds the memory map. `Memory(program)` keeps the program as a 32 KiB ROM image at `0x0000`–`0x7FFF`, padded with zeros. Addresses `0x8000`–`0xFFFF` are RAM.
  - A program longer than 32 KiB raises `ValueError`.
  - A write into ROM raises `ForbiddenWriteError`.
  - An address or byte that is out of range raises `ValueError`.
- `gbcemu.cpu` holds `Registers`, `Clock` and `CPU`.
  - `Registers` has `af`, `bc`, `de` and `hl` as 16-bit properties you can read and assign, and `set_flags(z, n, h, c)`. A flag passed as `None` keeps its current value.
  - `CPU` has `fetch()`, `execute(instruction)`, `step()` and `run(max_steps)`.
- `gbcemu.cli` holds `read_program(path)` and the `gbcemu` command. `read_program` raises `ProgramTooLargeError` for a file over 32 KiB.

## Installation

```
pip install .
```

## Command line

```
gbcemu path/to/program.bin
gbcemu path/to/program.bin --max-steps 1000
```

The command loads the program as a ROM image and runs the CPU on it.

- Without `--max-steps` it runs until it is interrupted.
- If no path is given, it reads `./tests/fixtures/program.bin`.
- It prints `error: ...` and exits with status 1 in three cases: the file cannot be read, the program is too large, or a ROM write is attempted.

## Library use

```python
from gbcemu.cli import read_program
from gbcemu.memory import Memory
from gbcemu.cpu import CPU

cpu = CPU(Memory(read_program("program.bin")))
cpu.run(1000)          # execute at most 1000 instructions
print(hex(cpu.registers.bc), cpu.clock.cycles)
```

The CPU starts with its registers at their post-boot values. The program counter is `0x0100`, the stack pointer is `0xFFFE`, and `AF=0x01B0`, `BC=0x0013`, `DE=0x00D8`, `HL=0x014D`.

`step()` executes one instruction and returns it. `run(max_steps)` returns the number of instructions it executed.

## What it does not do

Only these instructions are carried out:

- `NOP`
- `LD B,u8`, `LD C,u8`, `LD D,u8`, `LD E,u8`
- `LD BC,u16`, `LD DE,u16`
- `LD (BC),A`, `LD (DE),A`
- `INC E`

Every other opcode, `STOP` and `Invalid` included, is fetched and then skipped. It has no effect and adds no cycles.

The package has no graphics output, sound, joypad input, interrupts, timers, I/O registers or cartridge bank switching. It cannot play games yet.

## Tests

```
pip install .[test]
pytest
```