from __future__ import annotations

import logging

from vigcrack.classical.common import Direction, is_az, key_shifts, shift_char
from vigcrack.classical.monoalphabetic.caesar import break_caesar_column
from vigcrack.core.errors import InvalidArgumentError
from vigcrack.core.registry import register_plugin
from vigcrack.core.results import RecoveredKey
from vigcrack.core.scoring import ReferenceFrequencies, get_reference_frequencies
from vigcrack.core.utils import normalize_az, split_columns

logger = logging.getLogger(__name__)


def vigenere_transform(text: str, key: str, direction: Direction = Direction.ENCRYPT) -> str:
    """
    Letters are uppercased and shifted by the matching key letter (A=0 .. Z=25),
    forwards to encrypt and backwards to decrypt. Non-letters are kept as they are
    and do not consume a key letter.
    """
    shifts = key_shifts(key)
    sign = int(direction)

    out = []
    j = 0
    for ch in text:
        up = ch.upper()
        if len(up) == 1 and is_az(up):
            out.append(shift_char(up, sign * shifts[j % len(shifts)]))
            j += 1
        else:
            out.append(ch)
    return "".join(out)


def vigenere_encrypt(text: str, key: str) -> str:
    return vigenere_transform(text, key, Direction.ENCRYPT)


def vigenere_decrypt(text: str, key: str) -> str:
    return vigenere_transform(text, key, Direction.DECRYPT)


# ----------------------------
# Key recovery
# ----------------------------


def recover_key(
    ciphertext: str, key_length: int, reference: ReferenceFrequencies | None = None
) -> RecoveredKey:
    """
    Split the ciphertext into key_length columns and break each one as a Caesar cipher.
    Column i only ever sees key letter i, so the columns are solved independently.
    """
    if key_length < 1:
        raise InvalidArgumentError(f"Key length must be >= 1 (got {key_length}).")
    ref = reference or get_reference_frequencies()
    az = normalize_az(ciphertext)

    shifts = tuple(break_caesar_column(col, ref) for col in split_columns(az, key_length))
    key = "".join(r.letter for r in shifts)
    logger.debug("key length %d -> recovered key %s", key_length, key)
    return RecoveredKey(key=key, shifts=shifts)


def break_vigenere(
    ciphertext: str, key_length: int, reference: ReferenceFrequencies | None = None
) -> tuple[RecoveredKey, str]:
    recovered = recover_key(ciphertext, key_length, reference)
    return recovered, vigenere_decrypt(normalize_az(ciphertext), recovered.key)


class VigenereCipher:
    name = "vigenere"

    def encrypt(self, plaintext: str, key: str) -> str:
        return vigenere_encrypt(plaintext, key)

    def decrypt(self, ciphertext: str, key: str) -> str:
        return vigenere_decrypt(ciphertext, key)


register_plugin(VigenereCipher())
