import pytest

from gbcemu.cli import ProgramTooLargeError, main, read_program
from gbcemu.memory import ROM_SIZE


def test_read_program_pads_to_rom_size(tmp_path):
    path = tmp_path / "program.bin"
    path.write_bytes(b"\x01\x02")
    program = read_program(path)
    assert len(program) == ROM_SIZE
    assert program[:2] == b"\x01\x02"
    assert set(program[2:]) == {0}


def test_read_program_too_large(tmp_path):
    path = tmp_path / "program.bin"
    path.write_bytes(bytes(ROM_SIZE + 1))
    with pytest.raises(ProgramTooLargeError):
        read_program(path)


def test_read_program_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_program(tmp_path / "missing.bin")


def test_main_runs_bounded(tmp_path):
    path = tmp_path / "program.bin"
    path.write_bytes(bytes(0x200))
    assert main([str(path), "--max-steps", "5"]) == 0


def test_main_reports_missing_program(tmp_path, capsys):
    assert main([str(tmp_path / "missing.bin"), "--max-steps", "1"]) == 1
    assert "error" in capsys.readouterr().err


def test_main_reports_rom_write(tmp_path, capsys):
    path = tmp_path / "program.bin"
    path.write_bytes(bytes(0x100) + b"\x02")
    assert main([str(path), "--max-steps", "1"]) == 1
    assert "ROM" in capsys.readouterr().err