"""
exceptions.py

Errors raised by the huffman core. They all derive from ValueError so code
that already guards calls with ``except ValueError`` keeps working.
"""

from typing import Any, Optional


class HuffmanError(ValueError):
    """Base class for all huffcodec errors."""


class EmptyInputError(HuffmanError):
    def __init__(self, message: str = "Cannot build a Huffman tree from empty input") -> None:
        super().__init__(message)


class SymbolNotInTableError(HuffmanError):
    def __init__(self, symbol: Any, position: Optional[int] = None) -> None:
        self.symbol = symbol
        self.position = position
        if position is None:
            message = f"Symbol {symbol!r} has no code in the code table"
        else:
            message = f"Symbol {symbol!r} at position {position} has no code in the code table"
        super().__init__(message)


class MalformedStreamError(HuffmanError):
    def __init__(self, message: str, position: Optional[int] = None) -> None:
        self.position = position
        super().__init__(message)
