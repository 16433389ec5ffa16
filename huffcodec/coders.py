"""
coders.py

Huffman encoder and decoder. Streams are str values made of '0' and '1'.

"""


import abc
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from .exceptions import MalformedStreamError, SymbolNotInTableError
from .logger import Logger, CodingLog, CodingProgressStep
from .models import HuffmanNode
from .validators import validate_bits, validate_type


def encode(symbols: Iterable[Any], code_table: Mapping) -> str:
    """
    Concatenate the codes of the given symbols in order.

    Args:
        symbols (Iterable[Any]): The text, e.g. a str or a list of Symbol.
        code_table (Mapping): Symbol to code mapping, usually a CodeTable.

    Returns:
        str: The encoded stream.

    Raises:
        SymbolNotInTableError: If a symbol has no code.
    """
    if not isinstance(code_table, Mapping):
        raise ValueError("Code table must be a mapping")
    encoded_bits = []
    for position, sym in enumerate(symbols):
        try:
            encoded_bits.append(code_table[sym])
        except KeyError:
            raise SymbolNotInTableError(sym, position) from None
    return ''.join(encoded_bits)


def decode(encoded_bits: str, root: HuffmanNode) -> List[Any]:
    """
    Walk the tree bit by bit and emit a symbol at every leaf.

    When the root is itself a leaf every bit stands for one occurrence of its
    symbol.

    Args:
        encoded_bits (str): The encoded stream.
        root (HuffmanNode): Root of the tree the stream was encoded with.

    Returns:
        List[Any]: The decoded symbols.

    Raises:
        MalformedStreamError: If the stream holds anything but '0' and '1', or
            ends part way through a code.
    """
    validate_type(root, "Root", HuffmanNode)
    validate_bits(encoded_bits)

    if root.is_leaf():
        return [root.symbol] * len(encoded_bits)

    decoded_symbols = []
    node = root
    code_start = 0
    for position, bit in enumerate(encoded_bits):
        if node is root:
            code_start = position
        node = node.left if bit == '0' else node.right
        if node.is_leaf():
            decoded_symbols.append(node.symbol)
            node = root
    if node is not root:
        raise MalformedStreamError(
            f"Stream ends inside a code starting at bit {code_start}", code_start)
    return decoded_symbols


class CoderBase(abc.ABC):
    """
    Abstract base class for coders.
    """

    @abc.abstractmethod
    def encode(self, symbols: List[Any], code_table: Mapping) -> str:
        """
        Encode a sequence of symbols into a bit stream.

        Args:
            symbols (List[Any]): The list of symbols to be encoded.
            code_table (Mapping): The codes to encode with.

        Returns:
            str: The encoded stream.
        """
        pass

    @abc.abstractmethod
    def decode(self, encoded_bits: str, root: HuffmanNode) -> List[Any]:
        """
        Decode a bit stream back into a list of symbols.

        Args:
            encoded_bits (str): The encoded stream.
            root (HuffmanNode): The tree the stream was encoded with.

        Returns:
            List[Any]: The decoded list of symbols.
        """
        pass

    @abc.abstractmethod
    def get_coder_code(self) -> int:
        """
        Get the code for the coder.

        Returns:
            int: The coder code.
        """
        pass


class HuffmanCoder(CoderBase):
    """
    Tree based Huffman coder with optional logging.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger
        self.coder_code: int = 1

    def encode(self, symbols: List[Any], code_table: Mapping) -> str:
        validate_type(symbols, "Symbols", (list, tuple, str))
        encoded_bits = encode(symbols, code_table)
        if self.logger is not None:
            self.logger.log(CodingProgressStep("Encoded symbols", len(symbols)))
            self.logger.log(CodingLog(len(symbols), len(encoded_bits)))
        return encoded_bits

    def decode(self, encoded_bits: str, root: HuffmanNode) -> List[Any]:
        decoded_symbols = decode(encoded_bits, root)
        if self.logger is not None:
            self.logger.log(CodingProgressStep("Decoded symbols", len(decoded_symbols)))
            self.logger.log(CodingLog(len(decoded_symbols), len(encoded_bits)))
        return decoded_symbols

    def get_coder_code(self) -> int:
        """
        Get the coder code.

        Returns:
            int: The code (1 for the Huffman coder).
        """
        return self.coder_code


def get_coder(code: int, logger: Optional[Logger] = None) -> CoderBase:
    """
    Retrieve a coder instance based on the given code.

    Args:
        code (int): The coder code (1 for Huffman).
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        CoderBase: An instance of a coder.

    Raises:
        ValueError: If the coder code is unknown.
    """
    if code == 1:
        return HuffmanCoder(logger)
    else:
        raise ValueError("Unknown coder code: " + str(code))
