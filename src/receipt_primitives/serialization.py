"""
Structured Receipts
^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Conversion of logs, payloads and receipts to and from JSON compatible
dictionaries, for snapshots and test fixtures.

Keys are the field names of the data model. Byte strings are written as `0x`
prefixed hex, the cumulative gas used as a hex quantity, and the small
integers (`tx_type`, `deposit_nonce`, `deposit_nonce_version`) as plain
numbers. When loading, every integer may be given either way. The deposit
nonce fields default to absent when missing.
"""
import logging
from typing import Any, Callable, Dict, Optional, TypeVar

from ethereum_types.numeric import U8, U32, U64, U256

from .exceptions import ReceiptJsonError
from .receipt import Log, Receipt, ReceiptPayload, validate_deposit_nonce
from .utils.hexadecimal import (
    encode_to_hex,
    hex_to_address,
    hex_to_bloom,
    hex_to_bytes,
    hex_to_hash,
    parse_hex_or_int,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _load(raw: Dict[str, Any], key: str, parse: Callable[[Any], T]) -> T:
    if not isinstance(raw, dict):
        raise ReceiptJsonError(f"expected an object, got {type(raw).__name__}")
    if key not in raw:
        raise ReceiptJsonError("missing field", key)
    try:
        return parse(raw[key])
    except ReceiptJsonError:
        raise
    except (AttributeError, TypeError, ValueError, OverflowError) as e:
        raise ReceiptJsonError(str(e) or type(e).__name__, key) from e


def _load_optional(
    raw: Dict[str, Any], key: str, parse: Callable[[Any], T]
) -> Optional[T]:
    if raw.get(key) is None:
        return None
    return _load(raw, key, parse)


def _parse_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {value!r}")
    return value


def _parse_list(value: Any) -> list:
    if not isinstance(value, list):
        raise TypeError(f"expected a list, got {type(value).__name__}")
    return value


#
# Log
#


def log_to_json(log: Log) -> Dict[str, Any]:
    """
    Encode a log to a JSON compatible dictionary.
    """
    return {
        "address": encode_to_hex(log.address),
        "topics": [encode_to_hex(topic) for topic in log.topics],
        "data": encode_to_hex(log.data),
    }


def json_to_log(raw: Dict[str, Any]) -> Log:
    """
    Load a log from its JSON compatible dictionary.

    Parameters
    ----------
    raw :
        Dictionary with `address`, `topics` and `data` keys.

    Returns
    -------
    log : `Log`
        The loaded log.
    """
    return Log(
        address=_load(raw, "address", hex_to_address),
        topics=_load(
            raw,
            "topics",
            lambda topics: tuple(hex_to_hash(t) for t in _parse_list(topics)),
        ),
        data=_load(raw, "data", hex_to_bytes),
    )


#
# Receipt payload
#


def payload_to_json(payload: ReceiptPayload) -> Dict[str, Any]:
    """
    Encode a receipt payload to a JSON compatible dictionary. Absent deposit
    nonce fields are written as `None`.
    """
    deposit_nonce = payload.deposit_nonce
    deposit_nonce_version = payload.deposit_nonce_version
    return {
        "success": payload.success,
        "cumulative_gas_used": hex(int(payload.cumulative_gas_used)),
        "logs_bloom": encode_to_hex(payload.logs_bloom),
        "logs": [log_to_json(log) for log in payload.logs],
        "deposit_nonce": (
            None if deposit_nonce is None else int(deposit_nonce)
        ),
        "deposit_nonce_version": (
            None
            if deposit_nonce_version is None
            else int(deposit_nonce_version)
        ),
    }


def json_to_payload(raw: Dict[str, Any]) -> ReceiptPayload:
    """
    Load a receipt payload from its JSON compatible dictionary.

    The logs bloom is taken as stored; it is not derived again from the logs.
    Missing deposit nonce fields are loaded as absent, but if one of them is
    present the other must be too.

    Parameters
    ----------
    raw :
        Dictionary as produced by `payload_to_json`.

    Returns
    -------
    payload : `ReceiptPayload`
        The loaded payload.
    """
    payload = ReceiptPayload(
        success=_load(raw, "success", _parse_bool),
        cumulative_gas_used=_load(
            raw, "cumulative_gas_used", lambda v: parse_hex_or_int(v, U256)
        ),
        logs_bloom=_load(raw, "logs_bloom", hex_to_bloom),
        logs=_load(
            raw,
            "logs",
            lambda logs: tuple(json_to_log(log) for log in _parse_list(logs)),
        ),
        deposit_nonce=_load_optional(
            raw, "deposit_nonce", lambda v: parse_hex_or_int(v, U64)
        ),
        deposit_nonce_version=_load_optional(
            raw, "deposit_nonce_version", lambda v: parse_hex_or_int(v, U32)
        ),
    )

    if payload.deposit_nonce is None:
        logger.debug("loaded receipt payload without deposit nonce")
    validate_deposit_nonce(payload)

    return payload


#
# Receipt
#


def receipt_to_json(receipt: Receipt) -> Dict[str, Any]:
    """
    Encode a receipt to a JSON compatible dictionary.
    """
    return {
        "tx_type": int(receipt.tx_type),
        "payload": payload_to_json(receipt.payload),
    }


def json_to_receipt(raw: Dict[str, Any]) -> Receipt:
    """
    Load a receipt from its JSON compatible dictionary.
    """
    return Receipt(
        tx_type=_load(raw, "tx_type", lambda v: parse_hex_or_int(v, U8)),
        payload=_load(raw, "payload", json_to_payload),
    )
