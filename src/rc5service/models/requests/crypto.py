from pydantic import BaseModel, Field


class CryptoRequest(BaseModel):
    w: int = Field(..., description="Word size in bits: 16, 32 or 64")
    r: int = Field(..., description="Number of rounds, 0 to 255")
    text: str = Field(..., description="Plaintext, or hex ciphertext to decrypt")
    key: str | None = Field(default=None, description="Secret key, UTF-8 encoded")


class CryptoResponse(BaseModel):
    result: str
