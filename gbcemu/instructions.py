"""Instruction set and opcode decoding."""

from enum import Enum, auto


class Instruction(Enum):
    """Instructions known to the decoder."""

    # 8-bit loads
    LD_A_u8 = auto()
    LD_B_u8 = auto()
    LD_C_u8 = auto()
    LD_D_u8 = auto()
    LD_E_u8 = auto()
    LD_H_u8 = auto()
    LD_L_u8 = auto()

    LD_A_BC = auto()
    LD_BC_A = auto()
    LD_A_DE = auto()
    LD_DE_A = auto()

    LD_HL_A_Plus = auto()
    LD_HL_A_Minus = auto()
    LD_A_HL_Plus = auto()
    LD_A_HL_Minus = auto()

    LD_HL_u8 = auto()

    LD_B_A = auto()
    LD_B_B = auto()
    LD_B_C = auto()
    LD_B_D = auto()
    LD_B_E = auto()
    LD_B_H = auto()
    LD_B_L = auto()
    LD_B_HL = auto()

    LD_C_A = auto()
    LD_C_B = auto()
    LD_C_C = auto()
    LD_C_D = auto()
    LD_C_E = auto()
    LD_C_H = auto()
    LD_C_L = auto()
    LD_C_HL = auto()

    LD_D_A = auto()
    LD_D_B = auto()
    LD_D_C = auto()
    LD_D_D = auto()
    LD_D_E = auto()
    LD_D_H = auto()
    LD_D_L = auto()
    LD_D_HL = auto()

    LD_E_A = auto()
    LD_E_B = auto()
    LD_E_C = auto()
    LD_E_D = auto()
    LD_E_E = auto()
    LD_E_H = auto()
    LD_E_L = auto()
    LD_E_HL = auto()

    LD_H_A = auto()
    LD_H_B = auto()
    LD_H_C = auto()
    LD_H_D = auto()
    LD_H_E = auto()
    LD_H_H = auto()
    LD_H_L = auto()
    LD_H_HL = auto()

    LD_L_A = auto()
    LD_L_B = auto()
    LD_L_C = auto()
    LD_L_D = auto()
    LD_L_E = auto()
    LD_L_H = auto()
    LD_L_L = auto()
    LD_L_HL = auto()

    # 16-bit loads
    LD_BC_u16 = auto()
    LD_DE_u16 = auto()
    LD_HL_u16 = auto()
    LD_SP_u16 = auto()
    LD_u16_SP = auto()

    # 8-bit arithmetic
    INC_A = auto()
    INC_B = auto()
    INC_C = auto()
    INC_D = auto()
    INC_E = auto()
    INC_H = auto()
    INC_L = auto()
    DEC_A = auto()
    DEC_B = auto()
    DEC_C = auto()
    DEC_D = auto()
    DEC_E = auto()
    DEC_H = auto()
    DEC_L = auto()

    DAA = auto()
    SCF = auto()
    CPL = auto()
    CCF = auto()

    # 16-bit arithmetic
    INC_BC = auto()
    INC_DE = auto()
    INC_HL = auto()
    INC_SP = auto()
    DEC_BC = auto()
    DEC_DE = auto()
    DEC_HL = auto()
    DEC_SP = auto()
    ADD_HL_BC = auto()
    ADD_HL_DE = auto()
    ADD_HL_HL = auto()
    ADD_HL_SP = auto()

    # rotates and shifts
    RLCA = auto()
    RRCA = auto()
    RLA = auto()
    RRA = auto()

    # branches
    JR_i8 = auto()
    JR_NZ_i8 = auto()
    JR_NC_i8 = auto()
    JR_C_i8 = auto()
    JR_Z_i8 = auto()
    JP_u16 = auto()

    # control
    STOP = auto()
    NOP = auto()
    HALT = auto()
    Invalid = auto()


_I = Instruction

_OPCODES: dict[int, Instruction] = {
    0x00: _I.NOP, 0x01: _I.LD_BC_u16, 0x02: _I.LD_BC_A, 0x03: _I.INC_BC,
    0x04: _I.INC_B, 0x05: _I.DEC_B, 0x06: _I.LD_B_u8, 0x07: _I.RLCA,
    0x08: _I.LD_u16_SP, 0x09: _I.ADD_HL_BC, 0x0A: _I.LD_A_BC, 0x0B: _I.DEC_BC,
    0x0C: _I.INC_C, 0x0D: _I.DEC_C, 0x0E: _I.LD_C_u8, 0x0F: _I.RRCA,

    0x10: _I.STOP, 0x11: _I.LD_DE_u16, 0x12: _I.LD_DE_A, 0x13: _I.INC_DE,
    0x14: _I.INC_D, 0x15: _I.DEC_D, 0x16: _I.LD_D_u8, 0x17: _I.RLA,
    0x18: _I.JR_i8, 0x19: _I.ADD_HL_DE, 0x1A: _I.LD_A_DE, 0x1B: _I.DEC_DE,
    0x1C: _I.INC_E, 0x1D: _I.DEC_E, 0x1E: _I.LD_E_u8, 0x1F: _I.RRA,

    0x20: _I.JR_NZ_i8, 0x21: _I.LD_HL_u16, 0x22: _I.LD_HL_A_Plus, 0x23: _I.INC_HL,
    0x24: _I.INC_H, 0x25: _I.DEC_H, 0x26: _I.LD_H_u8, 0x27: _I.DAA,
    0x28: _I.JR_Z_i8, 0x29: _I.ADD_HL_HL, 0x2A: _I.LD_A_HL_Plus, 0x2B: _I.DEC_HL,
    0x2C: _I.INC_L, 0x2D: _I.DEC_L, 0x2E: _I.LD_L_u8, 0x2F: _I.CPL,

    0x30: _I.JR_NC_i8, 0x31: _I.LD_SP_u16, 0x32: _I.LD_HL_A_Minus, 0x33: _I.INC_SP,
    0x34: _I.INC_HL, 0x35: _I.DEC_HL, 0x36: _I.LD_HL_u8, 0x37: _I.SCF,
    0x38: _I.JR_C_i8, 0x39: _I.ADD_HL_SP, 0x3A: _I.LD_A_HL_Minus, 0x3B: _I.DEC_SP,
    0x3C: _I.INC_A, 0x3D: _I.DEC_A, 0x3E: _I.LD_A_u8, 0x3F: _I.CCF,

    0x40: _I.LD_B_B, 0x41: _I.LD_B_C, 0x42: _I.LD_B_D, 0x43: _I.LD_B_E,
    0x44: _I.LD_B_H, 0x45: _I.LD_B_L, 0x46: _I.LD_B_HL, 0x47: _I.LD_B_A,
    0x48: _I.LD_C_B, 0x49: _I.LD_C_C, 0x4A: _I.LD_C_D, 0x4B: _I.LD_C_E,
    0x4C: _I.LD_C_H, 0x4D: _I.LD_C_L, 0x4E: _I.LD_C_HL, 0x4F: _I.LD_C_A,

    0x50: _I.LD_D_B, 0x51: _I.LD_D_C, 0x52: _I.LD_D_D, 0x53: _I.LD_D_E,
    0x54: _I.LD_D_H, 0x55: _I.LD_D_L, 0x56: _I.LD_D_HL, 0x57: _I.LD_D_A,
    0x58: _I.LD_E_B, 0x59: _I.LD_E_C, 0x5A: _I.LD_E_D, 0x5B: _I.LD_E_E,
    0x5C: _I.LD_E_H, 0x5D: _I.LD_E_L, 0x5E: _I.LD_E_HL, 0x5F: _I.LD_E_A,
}


def decode(byte: int) -> Instruction:
    """Decode an opcode byte; unknown opcodes decode to ``Instruction.Invalid``."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"opcode must fit in 8 bits, got {byte!r}")
    return _OPCODES.get(byte, Instruction.Invalid)