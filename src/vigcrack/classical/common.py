from __future__ import annotations

from enum import IntEnum

from vigcrack.core.errors import InvalidArgumentError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
A_ORD = ord("A")
Z_ORD = ord("Z")


class Direction(IntEnum):
    ENCRYPT = 1
    DECRYPT = -1


def is_az(ch: str) -> bool:
    o = ord(ch)
    return A_ORD <= o <= Z_ORD


def norm_key_alpha(key: str) -> str:
    """Uppercase and keep only A-Z."""
    return "".join(ch for ch in key.upper() if "A" <= ch <= "Z")


def key_shifts(key: str) -> list[int]:
    """'CAB' -> [2, 0, 1]; raises if the key has no letters."""
    k = norm_key_alpha(key or "")
    if not k:
        raise InvalidArgumentError("Key must contain at least one A-Z letter.")
    return [ord(ch) - A_ORD for ch in k]


def shift_char(ch: str, shift: int) -> str:
    """Shift one A-Z character by 'shift' (can be negative)."""
    idx = (ord(ch) - A_ORD + shift) % 26
    return chr(A_ORD + idx)


def shift_text(text: str, shift: int) -> str:
    """Caesar shift; letters come out uppercase, non-letters are untouched."""
    out = []
    for ch in text:
        up = ch.upper()
        if len(up) == 1 and is_az(up):
            out.append(shift_char(up, shift))
        else:
            out.append(ch)
    return "".join(out)


def parse_shift(raw: str | int, limit: int = 25) -> int:
    """Parse a shift argument; must be an integer in -limit..limit."""
    try:
        shift = int(raw)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError("Shift must be a valid integer.") from e
    if not -limit <= shift <= limit:
        raise InvalidArgumentError(f"Shift must be between -{limit} and {limit}.")
    return shift


def require_alpha_key(key: str) -> str:
    """Keys given to the encrypt/decrypt tools must be non-empty and letters only."""
    if not key:
        raise InvalidArgumentError("Key cannot be empty.")
    if not all(len(ch.upper()) == 1 and is_az(ch.upper()) for ch in key):
        raise InvalidArgumentError("Key must contain only letters.")
    return key.upper()
