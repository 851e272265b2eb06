from typing import Set, Tuple

from ethereum_types.bytes import Bytes

from receipt_primitives.crypto.hash import keccak256
from receipt_primitives.receipt import Log
from receipt_primitives.utils.hexadecimal import hex_to_address

hash1 = keccak256(b"foo")
hash2 = keccak256(b"bar")
hash3 = keccak256(b"baz")
hash4 = keccak256(b"quux")

address1 = hex_to_address("0x00000000219ab540356cbb839cbe05303d7705fa")
address2 = hex_to_address("0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")

log1 = Log(
    address=address1,
    topics=(hash1, hash2),
    data=Bytes(b"foobar"),
)

log2 = Log(
    address=address2,
    topics=(hash3,),
    data=Bytes(b"quux"),
)

log3 = Log(
    address=address1,
    topics=(hash4, hash1, hash2, hash3),
    data=Bytes(b"\xff" * 300),
)

ZERO_BLOOM = bytes(256)

# Encoding of `[1, 21000, <256 zero bytes>, []]`
LEGACY_21000_RECEIPT = (
    bytes.fromhex("f90108" "01" "825208" "b90100")
    + ZERO_BLOOM
    + bytes.fromhex("c0")
)


def bloom_bits(entry: bytes) -> Set[Tuple[int, int]]:
    """
    (byte index, mask) pairs an entry sets in a bloom, computed directly
    from the low 11 bits of the first three 16-bit words of its hash.
    """
    digest = keccak256(entry)
    bits = set()
    for offset in (0, 2, 4):
        bit = int.from_bytes(digest[offset : offset + 2], "big") & 2047
        bits.add((255 - bit // 8, 1 << (bit % 8)))
    return bits
