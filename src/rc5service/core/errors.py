__all__ = [
    "RC5Error",
    "InvalidParameterError",
    "InvalidWordSizeError",
    "InvalidRoundCountError",
    "InvalidKeyLengthError",
    "MalformedInputError",
    "InvalidHexError",
    "BlockAlignmentError",
]


class RC5Error(ValueError):
    """Base class for every failure raised by the cipher engine."""


class InvalidParameterError(RC5Error):
    """Word size, round count or key length out of range."""


class InvalidWordSizeError(InvalidParameterError): ...


class InvalidRoundCountError(InvalidParameterError): ...


class InvalidKeyLengthError(InvalidParameterError): ...


class MalformedInputError(RC5Error):
    """Input could not be turned into whole cipher blocks."""


class InvalidHexError(MalformedInputError): ...


class BlockAlignmentError(MalformedInputError): ...
