from __future__ import annotations

from typing import Optional, Protocol

from .errors import InvalidArgumentError


class CipherPlugin(Protocol):
    name: str

    def encrypt(self, plaintext: str, key: str) -> str:
        ...

    def decrypt(self, ciphertext: str, key: str) -> str:
        ...


_PLUGINS: dict[str, CipherPlugin] = {}


def register_plugin(plugin: CipherPlugin) -> None:
    key = plugin.name.lower().strip()
    if not key:
        raise ValueError("Plugin must have a non-empty name.")
    _PLUGINS[key] = plugin


def list_plugins() -> list[str]:
    return sorted(_PLUGINS.keys())


def get_plugin(cipher_name: str) -> CipherPlugin:
    name = cipher_name.lower().strip()
    if name not in _PLUGINS:
        raise InvalidArgumentError(
            f"Unknown cipher '{cipher_name}'. Available: {', '.join(list_plugins())}"
        )
    return _PLUGINS[name]


def encrypt_known(cipher_name: str, plaintext: str, key: Optional[str]) -> str:
    if not key:
        raise InvalidArgumentError("This encrypt operation requires --key.")
    return get_plugin(cipher_name).encrypt(plaintext, key)


def decrypt_known(cipher_name: str, ciphertext: str, key: Optional[str]) -> str:
    if not key:
        raise InvalidArgumentError("This decrypt operation requires --key.")
    return get_plugin(cipher_name).decrypt(ciphertext, key)
