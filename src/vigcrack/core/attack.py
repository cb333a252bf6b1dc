from __future__ import annotations

import logging
from typing import Optional

from vigcrack.classical.polyalphabetic.vigenere import break_vigenere, vigenere_decrypt

from .config import AttackConfig
from .errors import InvalidArgumentError
from .features import MAX_KEY_LENGTH, ioc_scan
from .kasiski import kasiski_examination
from .results import AttackReport
from .utils import normalize_az

logger = logging.getLogger(__name__)

# Example ciphertext (key length 6), used when no input file is given
SAMPLE_CIPHERTEXT = (
    "ZVZPV TOGGE KHXSN LRYRP ZHZIO RZHZA ZCOAF PNOHF "
    "VEYHC ILCVS MGRYR SYXYR YSIEK RGBYX YRRCR IIVYH "
    "CIYBA GZSWE KDMIJ RTHVX ZIKG"
)


def run_attack(
    text: str,
    config: Optional[AttackConfig] = None,
    *,
    key_length: Optional[int] = None,
    manual_key: Optional[str] = None,
) -> AttackReport:
    """
    Full Kasiski attack on a Vigenère ciphertext:

      1) Kasiski: repeated n-grams -> distances -> GCD + distance histogram
      2) IoC sweep over key lengths 1..config.max_key_length
      3) if key_length is given: per-column chi-squared key recovery + decryption
      4) if manual_key is given: decrypt with it as well

    Choosing the key length (and any manual key) is left to the caller, typically
    after looking at the evidence from steps 1-2.
    """
    cfg = config or AttackConfig()
    ct = normalize_az(text)
    logger.debug("attack on %d letters", len(ct))

    kasiski = kasiski_examination(ct, cfg.ngram_lengths)
    ioc = ioc_scan(ct, max_length=cfg.max_key_length)

    recovered = None
    plaintext = None
    if key_length is not None:
        if not 1 <= key_length <= MAX_KEY_LENGTH:
            raise InvalidArgumentError(f"Key length must be in 1..{MAX_KEY_LENGTH} (got {key_length}).")
        recovered, plaintext = break_vigenere(ct, key_length, cfg.reference)

    # blank input means "no manual key"
    manual_key = (manual_key or "").strip()
    manual_plaintext = None
    if manual_key:
        manual_plaintext = vigenere_decrypt(ct, manual_key)

    return AttackReport(
        ciphertext=ct,
        kasiski=kasiski,
        ioc=ioc,
        key_length=key_length,
        recovered=recovered,
        plaintext=plaintext,
        manual_key=manual_key or None,
        manual_plaintext=manual_plaintext,
    )
