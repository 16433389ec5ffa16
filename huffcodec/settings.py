"""
settings.py

Package wide constants for huffcodec.
"""

VERSION = 1

# Uncompressed cost of one symbol, used for compression ratios.
BITS_PER_SYMBOL = 8

# Historical special case: these two symbols were always merged first.
LEGACY_FORCED_PAIR = ("C", "D")
