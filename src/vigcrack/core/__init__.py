from .config import AttackConfig
from .errors import CipherToolError, ErrorKind, FileAccessError, InvalidArgumentError
from .features import ioc_scan, letter_frequencies
from .kasiski import factor_distances, kasiski_examination
from .ngrams import find_repeated_ngrams
from .registry import decrypt_known, encrypt_known, list_plugins, register_plugin
from .results import AttackReport, IocScan, KasiskiReport, RecoveredKey

__all__ = [
    "AttackConfig",
    "CipherToolError",
    "ErrorKind",
    "FileAccessError",
    "InvalidArgumentError",
    "ioc_scan",
    "letter_frequencies",
    "factor_distances",
    "kasiski_examination",
    "find_repeated_ngrams",
    "decrypt_known",
    "encrypt_known",
    "list_plugins",
    "register_plugin",
    "AttackReport",
    "IocScan",
    "KasiskiReport",
    "RecoveredKey",
]
