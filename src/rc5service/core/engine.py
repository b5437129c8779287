"""Text-level RC5 operations.

``encrypt`` turns UTF-8 text into an uppercase hex string and ``decrypt``
reverses it. The key is given as text and used as its UTF-8 bytes. Each call
derives its own key schedule; nothing is shared between calls.
"""

from .encoding import bytes_to_hex, bytes_to_text, hex_to_bytes, text_to_bytes
from .padding import pad, unpad
from .rc5 import RC5

__all__ = ["decrypt", "encrypt"]


def encrypt(w: int, r: int, text: str, key: str) -> str:
    cipher = RC5(w, r, text_to_bytes(key))

    data = pad(text_to_bytes(text), cipher.block_size)
    return bytes_to_hex(cipher.encrypt(data))


def decrypt(w: int, r: int, hex_ciphertext: str, key: str) -> str:
    cipher = RC5(w, r, text_to_bytes(key))

    data = cipher.decrypt(hex_to_bytes(hex_ciphertext))
    return bytes_to_text(unpad(data, cipher.block_size))
