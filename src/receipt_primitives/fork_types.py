"""
Receipt Types
^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Byte types shared by the receipt data model.
"""

from ethereum_types.bytes import Bytes20, Bytes256

from .crypto.hash import Hash32

__all__ = ("Address", "Bloom", "Hash32", "BLOOM_BYTE_LENGTH")

Address = Bytes20
Bloom = Bytes256

BLOOM_BYTE_LENGTH = Bloom.LENGTH
"""
Size of a logs bloom in bytes (2048 bits).
"""
