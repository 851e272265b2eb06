"""
Utility functions used by the receipt primitives.
"""
