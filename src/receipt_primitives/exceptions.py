"""
Error types raised while building and loading receipts.
"""

from typing import Final, Optional


class ReceiptException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown during normal
    operation.
    """


class ReceiptJsonError(ReceiptException):
    """
    Thrown when a structured (JSON) representation of a receipt, payload or
    log cannot be loaded.
    """

    key: Final[Optional[str]]
    """
    The key whose value was missing or malformed, if known.
    """

    def __init__(self, message: str, key: Optional[str] = None):
        if key is not None:
            message = f"`{key}`: {message}"
        super().__init__(message)
        self.key = key


class InvalidDepositNonceError(ReceiptException):
    """
    Thrown when the deposit nonce and its version are not both present, or
    when the version is not one this package knows how to encode.
    """
