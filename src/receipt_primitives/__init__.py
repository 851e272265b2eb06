"""
Ethereum Receipt Primitives
^^^^^^^^^^^^^^^^^^^^^^^^^^^
Every transaction executed in a block leaves behind a receipt. The receipt
records whether execution succeeded, how much gas the block had consumed
once the transaction finished, which logs were emitted, and a bloom filter
summarising those logs so that searches can skip blocks quickly.

Receipts are committed to in the block header through the receipts root, so
anyone proving or verifying execution has to reproduce their encoding
exactly. This package contains the receipt data model together with that
canonical encoding, including the typed envelope introduced by
[EIP-2718] and the deposit nonce extension used by deposit transactions.

[EIP-2718]: https://eips.ethereum.org/EIPS/eip-2718
"""

__version__ = "0.1.0"
