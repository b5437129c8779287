from .crypto import CryptoRequest, CryptoResponse

__all__ = [
    "CryptoRequest",
    "CryptoResponse",
]
