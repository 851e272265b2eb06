"""
Utility Functions For Hexadecimal Strings
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Hexadecimal strings specific utility functions used when loading and dumping
structured receipts.
"""
from typing import Callable, TypeVar, Union

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import U8, U32, U64, U256, Uint

from ..fork_types import Address, Bloom, Hash32

W = TypeVar("W", Uint, U8, U32, U64, U256)


def has_hex_prefix(hex_string: str) -> bool:
    """
    Check if a hex string starts with hex prefix (0x).

    Parameters
    ----------
    hex_string :
        The hexadecimal string to be checked for presence of prefix.

    Returns
    -------
    has_prefix : `bool`
        Boolean indicating whether the hex string has 0x prefix.
    """
    return hex_string.startswith("0x")


def remove_hex_prefix(hex_string: str) -> str:
    """
    Remove 0x prefix from a hex string if present. This function returns the
    passed hex string if it isn't prefixed with 0x.

    Parameters
    ----------
    hex_string :
        The hexadecimal string whose prefix is to be removed.

    Returns
    -------
    modified_hex_string : `str`
        The hexadecimal string with the 0x prefix removed if present.
    """
    if has_hex_prefix(hex_string):
        return hex_string[len("0x") :]

    return hex_string


def hex_to_bytes(hex_string: str) -> Bytes:
    """
    Convert hex string to bytes.

    Parameters
    ----------
    hex_string :
        The hexadecimal string to be converted to bytes.

    Returns
    -------
    byte_stream : `bytes`
        Byte stream corresponding to the given hexadecimal string.
    """
    return bytes.fromhex(remove_hex_prefix(hex_string))


def hex_to_address(hex_string: str) -> Address:
    """
    Convert hex string to an address. The string must encode exactly 20
    bytes.
    """
    return Address(bytes.fromhex(remove_hex_prefix(hex_string)))


def hex_to_hash(hex_string: str) -> Hash32:
    """
    Convert hex string to hash32 (32 bytes).

    Parameters
    ----------
    hex_string :
        The hexadecimal string to be converted to hash32.

    Returns
    -------
    hash : `Hash32`
        32-byte stream obtained from the given hexadecimal string.
    """
    return Hash32(bytes.fromhex(remove_hex_prefix(hex_string)))


def hex_to_bloom(hex_string: str) -> Bloom:
    """
    Convert hex string to a logs bloom. The string must encode exactly 256
    bytes.
    """
    return Bloom(bytes.fromhex(remove_hex_prefix(hex_string)))


def parse_hex_or_int(
    value: Union[str, int], to_type: Callable[[int], W]
) -> W:
    """
    Read an unsigned integer type from a hex string or an int.

    Booleans are rejected even though they are `int` instances.
    """
    if isinstance(value, bool):
        raise TypeError("expected a hex string or an integer, got a bool")
    if isinstance(value, str) and has_hex_prefix(value):
        return to_type(int(remove_hex_prefix(value), 16))
    elif isinstance(value, str):
        return to_type(int(value))
    elif isinstance(value, int):
        return to_type(value)
    raise TypeError(f"expected a hex string or an integer, got {value!r}")


def encode_to_hex(data: Bytes) -> str:
    """
    Encode a byte string as a `0x` prefixed hex string.
    """
    return "0x" + data.hex()
