"""Command-line entry point: load a program and run it."""

import argparse
import sys
from pathlib import Path

from gbcemu.cpu import CPU
from gbcemu.memory import ROM_SIZE, ForbiddenWriteError, Memory

DEFAULT_PROGRAM = "./tests/fixtures/program.bin"


class ProgramTooLargeError(ValueError):
    """Raised when a program does not fit in ROM."""


def read_program(path) -> bytes:
    """Read a program file and pad it with zeros to the full ROM size."""
    program = Path(path).read_bytes()
    if len(program) > ROM_SIZE:
        raise ProgramTooLargeError(
            f"Program is too large, maximum size is {ROM_SIZE} bytes"
        )
    return program.ljust(ROM_SIZE, b"\x00")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run a program on the emulated CPU.")
    parser.add_argument("program", nargs="?", default=DEFAULT_PROGRAM)
    parser.add_argument(
        "--max-steps", type=int, default=None,
        help="stop after this many instructions (default: run forever)",
    )
    args = parser.parse_args(argv)

    try:
        program = read_program(args.program)
        cpu = CPU(Memory(program))
        cpu.run(args.max_steps)
    except (OSError, ProgramTooLargeError, ForbiddenWriteError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())