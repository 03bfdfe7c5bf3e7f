import pytest

from gbcemu.memory import ROM_SIZE, ForbiddenWriteError, Memory


def test_reads_program_bytes():
    memory = Memory(bytes([7, 8, 9]))
    assert [memory.read(address) for address in range(3)] == [7, 8, 9]


def test_short_program_is_padded_with_zeros():
    memory = Memory(b"\x01")
    assert memory.read(ROM_SIZE - 1) == 0


def test_program_too_large():
    with pytest.raises(ValueError):
        Memory(bytes(ROM_SIZE + 1))


def test_full_size_program_is_accepted():
    program = bytes([0xAA]) * ROM_SIZE
    assert Memory(program).read(ROM_SIZE - 1) == 0xAA


@pytest.mark.parametrize("address", [0x0000, 0x0100, 0x7FFF])
def test_write_to_rom_is_forbidden(address):
    memory = Memory()
    with pytest.raises(ForbiddenWriteError):
        memory.write(address, 1)


@pytest.mark.parametrize("address", [0x8000, 0xC000, 0xFFFF])
def test_ram_round_trip(address):
    memory = Memory()
    memory.write(address, 0x5A)
    assert memory.read(address) == 0x5A


def test_ram_cells_are_independent():
    memory = Memory()
    memory.write(0x8000, 1)
    memory.write(0x8001, 2)
    assert (memory.read(0x8000), memory.read(0x8001)) == (1, 2)


@pytest.mark.parametrize("address", [-1, 0x10000])
def test_address_out_of_range(address):
    memory = Memory()
    with pytest.raises(ValueError):
        memory.read(address)


def test_data_out_of_range():
    memory = Memory()
    with pytest.raises(ValueError):
        memory.write(0xC000, 0x100)