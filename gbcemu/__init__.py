"""Game Boy Color emulator core: bit helpers, opcode decoding, memory map, CPU and a command-line runner."""

__version__ = "0.1.0"
__all__ = ["bits", "cli", "cpu", "instructions", "memory"]