"""
Cryptographic primitives used by receipts.
"""
