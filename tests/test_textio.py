import pytest

from vigcrack.core.errors import ErrorKind, FileAccessError
from vigcrack.core.textio import (
    ENCRYPTED_PREFIX,
    output_path_for,
    read_text_file,
    write_prefixed_output,
)


def test_output_path_keeps_directory(tmp_path):
    assert output_path_for(tmp_path / "msg.txt", "shifted_") == tmp_path / "shifted_msg.txt"


def test_round_trip_file(tmp_path):
    src = tmp_path / "msg.txt"
    src.write_text("hello", encoding="utf-8")
    out = write_prefixed_output(src, ENCRYPTED_PREFIX, "HELLO")
    assert out.name == "encrypted_msg.txt"
    assert read_text_file(out) == "HELLO"


def test_missing_file(tmp_path):
    with pytest.raises(FileAccessError) as exc:
        read_text_file(tmp_path / "nope.txt")
    assert exc.value.kind is ErrorKind.FILE_NOT_FOUND
    assert isinstance(exc.value, OSError)


def test_unwritable_target(tmp_path):
    missing_dir = tmp_path / "missing" / "msg.txt"
    with pytest.raises(FileAccessError) as exc:
        write_prefixed_output(missing_dir, ENCRYPTED_PREFIX, "X")
    assert exc.value.kind is ErrorKind.WRITE_FAILED


def test_undecodable_file(tmp_path):
    src = tmp_path / "binary.txt"
    src.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(FileAccessError) as exc:
        read_text_file(src)
    assert exc.value.kind is ErrorKind.DECODE_FAILED
    assert "decode" in str(exc.value)
