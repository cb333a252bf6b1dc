from __future__ import annotations

from pathlib import Path

from .errors import ErrorKind, FileAccessError

ENCRYPTED_PREFIX = "encrypted_"
DECRYPTED_PREFIX = "decrypted_"
SHIFTED_PREFIX = "shifted_"


def read_text_file(path: str | Path) -> str:
    """Read a whole file as text."""
    p = Path(path)
    try:
        return p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FileAccessError(
            f"Could not decode file {p} as UTF-8", path=str(p), kind=ErrorKind.DECODE_FAILED
        ) from e
    except OSError as e:
        raise FileAccessError(
            f"Could not open file {p}", path=str(p), kind=ErrorKind.FILE_NOT_FOUND
        ) from e


def output_path_for(path: str | Path, prefix: str) -> Path:
    """notes/msg.txt + 'encrypted_' -> notes/encrypted_msg.txt"""
    p = Path(path)
    return p.with_name(prefix + p.name)


def write_prefixed_output(path: str | Path, prefix: str, content: str) -> Path:
    out = output_path_for(path, prefix)
    try:
        out.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileAccessError(
            f"Could not write to file {out}", path=str(out), kind=ErrorKind.WRITE_FAILED
        ) from e
    return out
