# Cipher engine. Kept free of FastAPI and logging so it can be used directly.
from .engine import decrypt, encrypt
from .errors import (
    BlockAlignmentError,
    InvalidHexError,
    InvalidKeyLengthError,
    InvalidParameterError,
    InvalidRoundCountError,
    InvalidWordSizeError,
    MalformedInputError,
    RC5Error,
)
from .rc5 import RC5

__all__ = [
    "RC5",
    "BlockAlignmentError",
    "InvalidHexError",
    "InvalidKeyLengthError",
    "InvalidParameterError",
    "InvalidRoundCountError",
    "InvalidWordSizeError",
    "MalformedInputError",
    "RC5Error",
    "decrypt",
    "encrypt",
]
