"""
Encoded Length Of RLP Items
^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Functions computing how many bytes [`rlp.encode`] produces for a value,
without producing the encoding. The rules mirror the encoder branch for
branch: single bytes below `0x80` encode as themselves, short strings and
lists take a one byte header, and long ones take a header followed by the
big endian length of their payload.

[`rlp.encode`]: ref:ethereum_rlp.rlp.encode
"""

from dataclasses import fields, is_dataclass
from typing import Sequence

from ethereum_rlp import Extended
from ethereum_rlp.exceptions import EncodingError
from ethereum_types.bytes import Bytes
from ethereum_types.numeric import FixedUnsigned, Uint

SHORT_PAYLOAD_LIMIT = 0x38
"""
Payloads shorter than this many bytes have their length folded into the
header byte.
"""


def header_length(payload_length: int) -> int:
    """
    Number of bytes taken by the header of a string or list whose payload is
    `payload_length` bytes long.
    """
    if payload_length < SHORT_PAYLOAD_LIMIT:
        return 1
    return 1 + len(Uint(payload_length).to_be_bytes())


def bytes_length(raw_bytes: Bytes) -> int:
    """
    Length of the RLP encoding of the byte string `raw_bytes`.
    """
    if len(raw_bytes) == 1 and raw_bytes[0] < 0x80:
        return 1
    return header_length(len(raw_bytes)) + len(raw_bytes)


def sequence_length(raw_sequence: Sequence[Extended]) -> int:
    """
    Length of the RLP encoding of the list `raw_sequence`.
    """
    payload_length = sum(encoded_length(item) for item in raw_sequence)
    return header_length(payload_length) + payload_length


def encoded_length(raw_data: Extended) -> int:
    """
    Length of `rlp.encode(raw_data)`, computed without encoding.

    Accepts every type `rlp.encode` accepts, branch for branch, so the two
    can be compared on arbitrary values. Receipt encoding itself only passes
    bytes, integers, booleans and lists.

    Parameters
    ----------
    raw_data :
        A `Bytes`, `Uint`, `U256`, `bool`, dataclass or sequence of `RLP`
        encodable objects.

    Returns
    -------
    length : `int`
        Number of bytes in the RLP encoding of `raw_data`.
    """
    if isinstance(raw_data, Sequence):
        if isinstance(raw_data, (bytearray, bytes)):
            return bytes_length(raw_data)
        elif isinstance(raw_data, str):
            return bytes_length(raw_data.encode())
        else:
            return sequence_length(raw_data)
    elif isinstance(raw_data, (Uint, FixedUnsigned)):
        return bytes_length(raw_data.to_be_bytes())
    elif isinstance(raw_data, bool):
        # `0x01` is its own encoding and the empty string is `0x80`.
        return 1
    elif is_dataclass(raw_data):
        return sequence_length(
            [getattr(raw_data, field.name) for field in fields(raw_data)]
        )
    else:
        raise EncodingError(
            "RLP Encoding of type {} is not supported".format(type(raw_data))
        )
