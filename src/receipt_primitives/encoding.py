"""
Receipt Encoding
^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Canonical byte encoding of receipts, as committed to by the receipts root.

A payload is encoded as the RLP list of its fields in declaration order. The
deposit nonce and its version are trailing list elements which are emitted
only when present, so a payload encodes as a list of 4 elements without them
and 6 with them.

Receipts of legacy transactions encode as their bare payload. Receipts of
[EIP-2718] typed transactions are prefixed with the transaction type byte.

[EIP-2718]: https://eips.ethereum.org/EIPS/eip-2718
"""
from typing import List

from ethereum_rlp import Extended, rlp
from ethereum_types.bytes import Bytes

from .receipt import (
    LEGACY_TX_TYPE,
    Log,
    Receipt,
    ReceiptPayload,
    validate_deposit_nonce,
)
from .rlp_utils import encoded_length


def log_fields(log: Log) -> List[Extended]:
    """
    Fields of `log`, in encoding order.
    """
    return [log.address, log.topics, log.data]


def payload_fields(payload: ReceiptPayload) -> List[Extended]:
    """
    Fields of `payload`, in encoding order, with absent trailing fields
    omitted.

    Parameters
    ----------
    payload :
        The receipt payload.

    Returns
    -------
    fields : `List[Extended]`
        Items of the RLP list that `payload` encodes as.
    """
    validate_deposit_nonce(payload)

    fields: List[Extended] = [
        payload.success,
        payload.cumulative_gas_used,
        payload.logs_bloom,
        [log_fields(log) for log in payload.logs],
    ]
    if payload.deposit_nonce is not None:
        fields.append(payload.deposit_nonce)
    if payload.deposit_nonce_version is not None:
        fields.append(payload.deposit_nonce_version)

    return fields


def encode_payload(payload: ReceiptPayload) -> Bytes:
    """
    Encodes a receipt payload as an RLP list.
    """
    return rlp.encode(payload_fields(payload))


def encode_receipt(receipt: Receipt) -> Bytes:
    """
    Encodes a receipt.

    Parameters
    ----------
    receipt :
        The receipt to encode.

    Returns
    -------
    encoded : `Bytes`
        The payload encoding, preceded by the transaction type byte unless
        the receipt belongs to a legacy transaction.
    """
    encoded_payload = encode_payload(receipt.payload)
    if receipt.tx_type == LEGACY_TX_TYPE:
        return encoded_payload
    return receipt.tx_type.to_bytes1() + encoded_payload


def write_receipt(receipt: Receipt, out: bytearray) -> None:
    """
    Append the encoding of `receipt` to the buffer `out`.
    """
    out += encode_receipt(receipt)


def payload_length(payload: ReceiptPayload) -> int:
    """
    Number of bytes in the encoding of `payload`.
    """
    return encoded_length(payload_fields(payload))


def receipt_length(receipt: Receipt) -> int:
    """
    Number of bytes in the encoding of `receipt`, computed without encoding
    it. Always equal to `len(encode_receipt(receipt))`.
    """
    length = payload_length(receipt.payload)
    if receipt.tx_type != LEGACY_TX_TYPE:
        length += 1
    return length
