from fastapi import APIRouter, HTTPException

from rc5service.core import decrypt, encrypt
from rc5service.models.requests import CryptoRequest, CryptoResponse
from rc5service.shared import Logger
from rc5service.shared.http import bad_request_handler

logger = Logger(__name__).get_logger()

router = APIRouter(prefix="/api/EncryptionDecryption")


def require_text(data: CryptoRequest):
    if not data.text or data.text.isspace():
        logger.warning("Rejected request without text")
        raise HTTPException(
            status_code=400, detail="Invalid request. 'text' required."
        )


@router.post("/Encrypt", response_model=CryptoResponse)
def encrypt_text(data: CryptoRequest):
    """
    Encrypt `text` with RC5-w/r and return the ciphertext as uppercase hex.

    JSON payload should include:
    - w: word size (16, 32 or 64)
    - r: number of rounds (0 to 255)
    - text: plaintext
    - key: secret key (optional, defaults to an empty key)
    """
    require_text(data)
    logger.debug(
        "Encrypting %s characters with RC5-%s/%s", len(data.text), data.w, data.r
    )

    with bad_request_handler():
        cipher_hex = encrypt(data.w, data.r, data.text, data.key or "")

    logger.info("Encrypted request into %s hex digits", len(cipher_hex))
    return CryptoResponse(result=cipher_hex)


@router.post("/Decrypt", response_model=CryptoResponse)
def decrypt_text(data: CryptoRequest):
    """
    Decrypt hex `text` with RC5-w/r and return the recovered plaintext.
    """
    require_text(data)
    logger.debug(
        "Decrypting %s hex digits with RC5-%s/%s", len(data.text), data.w, data.r
    )

    with bad_request_handler():
        plain = decrypt(data.w, data.r, data.text, data.key or "")

    logger.info("Decrypted request into %s characters", len(plain))
    return CryptoResponse(result=plain)
