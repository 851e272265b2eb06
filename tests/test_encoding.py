import pytest
from ethereum_rlp import rlp
from ethereum_types.bytes import Bytes
from ethereum_types.numeric import U32, U64, U256

from receipt_primitives.encoding import (
    encode_payload,
    encode_receipt,
    payload_fields,
    payload_length,
    receipt_length,
    write_receipt,
)
from receipt_primitives.exceptions import InvalidDepositNonceError
from receipt_primitives.receipt import (
    EMPTY_RECEIPT,
    EMPTY_RECEIPT_PAYLOAD,
    Log,
    Receipt,
    ReceiptPayload,
    make_receipt,
    with_deposit_nonce,
)

from .helpers import LEGACY_21000_RECEIPT, address2, hash1, log1, log2, log3

legacy_receipt = make_receipt(0, True, 21000, ())
typed_receipt = make_receipt(2, True, 21000, ())
deposit_receipt = with_deposit_nonce(make_receipt(126, True, 21000, ()), 5)

big_log = Log(address=address2, topics=(hash1,), data=Bytes(b"\x01" * 70000))

receipts = [
    EMPTY_RECEIPT,
    legacy_receipt,
    typed_receipt,
    deposit_receipt,
    make_receipt(0, False, 0, ()),
    make_receipt(1, True, 127, (log1,)),
    make_receipt(3, True, 128, (log1, log2, log3)),
    make_receipt(4, False, U256.MAX_VALUE, (log3,) * 20),
    make_receipt(2, True, 2**64, (big_log,)),
    with_deposit_nonce(make_receipt(126, True, 1, (log1,)), 0),
    with_deposit_nonce(make_receipt(0, True, 1, (log2,)), U64.MAX_VALUE),
]


def test_legacy_receipt_encoding() -> None:
    encoded = encode_receipt(legacy_receipt)

    assert encoded == LEGACY_21000_RECEIPT
    assert encoded[0] == 0xF9
    assert rlp.decode(encoded) == [
        b"\x01",
        b"\x52\x08",
        bytes(256),
        [],
    ]


def test_typed_receipt_encoding() -> None:
    encoded = encode_receipt(typed_receipt)

    assert encoded[0] == 2
    assert encoded[1:] == encode_payload(typed_receipt.payload)
    assert encoded == b"\x02" + LEGACY_21000_RECEIPT


def test_deposit_receipt_encoding() -> None:
    encoded = encode_receipt(deposit_receipt)

    assert encoded == (
        bytes.fromhex("7e" "f9010a" "01" "825208" "b90100")
        + bytes(256)
        + bytes.fromhex("c0" "05" "01")
    )
    assert len(rlp.decode(encoded[1:])) == 6


def test_failed_receipt_encodes_empty_status() -> None:
    encoded = encode_receipt(make_receipt(0, False, 0, ()))

    decoded = rlp.decode(encoded)
    assert decoded[0] == b""
    assert decoded[1] == b""


def test_logs_encoding() -> None:
    receipt = make_receipt(0, True, 1, (log1, log2))

    decoded = rlp.decode(encode_receipt(receipt))

    assert decoded[3] == [
        [log1.address, list(log1.topics), log1.data],
        [log2.address, list(log2.topics), log2.data],
    ]


def test_payload_fields_arity() -> None:
    assert len(payload_fields(legacy_receipt.payload)) == 4
    assert len(payload_fields(deposit_receipt.payload)) == 6
    assert payload_fields(deposit_receipt.payload)[4:] == [U64(5), U32(1)]


def test_payload_fields_rejects_version_without_nonce() -> None:
    payload = ReceiptPayload(
        success=True,
        cumulative_gas_used=U256(1),
        logs_bloom=EMPTY_RECEIPT_PAYLOAD.logs_bloom,
        logs=(),
        deposit_nonce=None,
        deposit_nonce_version=U32(1),
    )

    with pytest.raises(InvalidDepositNonceError):
        payload_fields(payload)

    with pytest.raises(InvalidDepositNonceError):
        encode_receipt(Receipt(tx_type=EMPTY_RECEIPT.tx_type, payload=payload))


@pytest.mark.parametrize("receipt", receipts)
def test_receipt_length_matches_encoding(receipt: Receipt) -> None:
    encoded = encode_receipt(receipt)

    assert receipt_length(receipt) == len(encoded)
    assert payload_length(receipt.payload) == len(
        encode_payload(receipt.payload)
    )


@pytest.mark.parametrize("receipt", receipts)
def test_type_prefix(receipt: Receipt) -> None:
    encoded = encode_receipt(receipt)
    encoded_payload = encode_payload(receipt.payload)

    if receipt.tx_type == 0:
        assert encoded == encoded_payload
        assert encoded[0] >= 0xC0
    else:
        assert encoded[0] == int(receipt.tx_type)
        assert encoded[1:] == encoded_payload


@pytest.mark.parametrize("receipt", receipts)
def test_encoding_is_deterministic(receipt: Receipt) -> None:
    assert encode_receipt(receipt) == encode_receipt(receipt)


def test_write_receipt_appends() -> None:
    out = bytearray(b"\xaa")

    write_receipt(typed_receipt, out)
    write_receipt(legacy_receipt, out)

    assert bytes(out) == (
        b"\xaa" + b"\x02" + LEGACY_21000_RECEIPT + LEGACY_21000_RECEIPT
    )
