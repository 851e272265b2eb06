"""
A `Receipt` is produced for every transaction executed in a block. It wraps a
`ReceiptPayload`, which holds the outcome of the execution, together with the
[EIP-2718] type of the transaction that produced it.

Receipts of deposit transactions may additionally carry the nonce of the
deposit and the version of that field. Both are trailing, optional, and are
only ever present together.

[EIP-2718]: https://eips.ethereum.org/EIPS/eip-2718
"""
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from ethereum_types.bytes import Bytes
from ethereum_types.frozen import modify, slotted_freezable
from ethereum_types.numeric import U8, U32, U64, U256

from .bloom import derive_bloom
from .exceptions import InvalidDepositNonceError
from .fork_types import BLOOM_BYTE_LENGTH, Address, Bloom, Hash32
from .utils.ensure import ensure

logger = logging.getLogger(__name__)

DEPOSIT_NONCE_VERSION = U32(1)
"""
Version of the deposit nonce field in the receipt.
"""

LEGACY_TX_TYPE = U8(0)
"""
Type of transactions (and receipts) that predate [EIP-2718] envelopes.

[EIP-2718]: https://eips.ethereum.org/EIPS/eip-2718
"""


@slotted_freezable
@dataclass
class Log:
    """
    Data record produced during the execution of a transaction.
    """

    address: Address
    topics: Tuple[Hash32, ...]
    data: Bytes


@slotted_freezable
@dataclass
class ReceiptPayload:
    """
    Execution outcome of a transaction, in encoding order.
    """

    success: bool
    cumulative_gas_used: U256
    logs_bloom: Bloom
    logs: Tuple[Log, ...]
    deposit_nonce: Optional[U64]
    deposit_nonce_version: Optional[U32]


@slotted_freezable
@dataclass
class Receipt:
    """
    Result of a transaction.
    """

    tx_type: U8
    payload: ReceiptPayload


EMPTY_LOG = Log(
    address=Address(bytes(Address.LENGTH)),
    topics=(),
    data=Bytes(b""),
)

EMPTY_RECEIPT_PAYLOAD = ReceiptPayload(
    success=False,
    cumulative_gas_used=U256(0),
    logs_bloom=Bloom(bytes(BLOOM_BYTE_LENGTH)),
    logs=(),
    deposit_nonce=None,
    deposit_nonce_version=None,
)

EMPTY_RECEIPT = Receipt(
    tx_type=LEGACY_TX_TYPE,
    payload=EMPTY_RECEIPT_PAYLOAD,
)


def make_receipt(
    tx_type: Union[U8, int],
    success: bool,
    cumulative_gas_used: Union[U256, int],
    logs: Sequence[Log],
) -> Receipt:
    """
    Make the receipt for a transaction that was executed.

    Parameters
    ----------
    tx_type :
        Type of the executed transaction, `0` for legacy transactions.
    success :
        Whether the transaction executed without error.
    cumulative_gas_used :
        The total gas used so far in the block after the transaction was
        executed.
    logs :
        The logs produced by the transaction.

    Returns
    -------
    receipt : `Receipt`
        The receipt for the transaction, with its logs bloom derived from
        `logs` and no deposit nonce.
    """
    logs = tuple(logs)
    return Receipt(
        tx_type=U8(tx_type),
        payload=ReceiptPayload(
            success=success,
            cumulative_gas_used=U256(cumulative_gas_used),
            logs_bloom=derive_bloom(logs),
            logs=logs,
            deposit_nonce=None,
            deposit_nonce_version=None,
        ),
    )


def with_deposit_nonce(
    receipt: Receipt, deposit_nonce: Union[U64, int]
) -> Receipt:
    """
    Return a copy of `receipt` carrying `deposit_nonce`, tagged with
    `DEPOSIT_NONCE_VERSION`. The original receipt is left untouched.
    """
    nonce = U64(deposit_nonce)

    def set_deposit_nonce(payload: ReceiptPayload) -> None:
        payload.deposit_nonce = nonce
        payload.deposit_nonce_version = DEPOSIT_NONCE_VERSION

    logger.debug(
        "attaching deposit nonce %s to receipt of type %s",
        nonce,
        receipt.tx_type,
    )
    return Receipt(
        tx_type=receipt.tx_type,
        payload=modify(receipt.payload, set_deposit_nonce),
    )


def validate_deposit_nonce(payload: ReceiptPayload) -> None:
    """
    Check that the deposit nonce extension of `payload` is well formed.

    Either both trailing fields are absent, or the nonce is present together
    with `DEPOSIT_NONCE_VERSION`. Raises `InvalidDepositNonceError` otherwise.
    """
    nonce = payload.deposit_nonce
    version = payload.deposit_nonce_version
    ensure(
        (nonce is None) == (version is None),
        InvalidDepositNonceError(
            "deposit nonce and deposit nonce version must be set together"
        ),
    )
    if version is not None:
        ensure(
            version == DEPOSIT_NONCE_VERSION,
            InvalidDepositNonceError(
                f"unsupported deposit nonce version `{version}`"
            ),
        )
