"""
models.py

The shared objects used in huffcodec: symbols, frequency tables, tree nodes
and code tables.

"""


from collections import abc
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

class Symbol:
    """
    Represents a single symbol in the data.
    """
    def __init__(self, data: Union[str, bytes]) -> None:
        if not isinstance(data, (str, bytes)):
            raise ValueError("Data must be of type str or bytes")
        if len(data) == 0:
            raise ValueError("Data must not be empty")
        self.data: Union[str, bytes] = data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Symbol):
            return self.data == other.data
        return False

    def __lt__(self, other: "Symbol") -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.data < other.data

    def __str__(self) -> str:
        return str(self.data)

    def __repr__(self) -> str:
        return repr(self.data)

    def __hash__(self) -> int:
        return hash(self.data)


class SymbolFrequency:
    """
    Represents a symbol together with its frequency.
    """
    def __init__(self, symbol: Any, frequency: int) -> None:
        self.symbol = symbol
        self.frequency: int = frequency

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return self.symbol == other.symbol and self.frequency == other.frequency
        return False

    def __str__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"


class FrequencyTable(abc.Mapping):
    """
    Read-only mapping from each distinct symbol to its occurrence count.
    """
    def __init__(self, counts: Mapping) -> None:
        for symbol, count in counts.items():
            if isinstance(count, bool) or not isinstance(count, int):
                raise ValueError(f"Frequency of {symbol!r} must be of type int")
            if count <= 0:
                raise ValueError(f"Frequency of {symbol!r} must be positive")
        self._counts = MappingProxyType(dict(counts))

    def __getitem__(self, symbol: Any) -> int:
        return self._counts[symbol]

    def __iter__(self) -> Iterator:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyTable({dict(self._counts)!r})"

    def total(self) -> int:
        """
        Get the number of symbols the table was counted from.

        Returns:
            int: Sum of all frequencies.
        """
        return sum(self._counts.values())

    def merge(self, other: "FrequencyTable") -> "FrequencyTable":
        """
        Add the counts of another table to this one.

        Args:
            other (FrequencyTable): Counts from a disjoint part of the text.

        Returns:
            FrequencyTable: A new table; both inputs are left untouched.
        """
        merged = dict(self._counts)
        for symbol, count in other.items():
            merged[symbol] = merged.get(symbol, 0) + count
        return FrequencyTable(merged)

    def most_common(self) -> List[SymbolFrequency]:
        """
        Get the entries ordered by descending frequency, then ascending symbol.

        Returns:
            List[SymbolFrequency]: The ordered entries.
        """
        ordered = sorted(self._counts.items(), key=lambda item: item[0])
        ordered.sort(key=lambda item: item[1], reverse=True)
        return [SymbolFrequency(symbol, count) for symbol, count in ordered]


class HuffmanNode:
    """
    Base of the two node kinds of a Huffman tree.

    Nodes order themselves for the merge heap: lower weight first, a leaf
    before an internal node of the same weight, leaves of the same weight by
    symbol and internal nodes of the same weight by creation order.
    """
    weight: int

    def is_leaf(self) -> bool:
        raise NotImplementedError

    def sort_key(self) -> Tuple:
        raise NotImplementedError

    def __lt__(self, other: "HuffmanNode") -> bool:
        return self.sort_key() < other.sort_key()

    def leaf_count(self) -> int:
        raise NotImplementedError

    def internal_count(self) -> int:
        raise NotImplementedError

    def depth(self) -> int:
        raise NotImplementedError


class LeafNode(HuffmanNode):
    """A node holding exactly one symbol and its frequency."""
    __slots__ = ("symbol", "weight")

    def __init__(self, symbol: Any, weight: int) -> None:
        if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
            raise ValueError("Leaf weight must be a positive int")
        self.symbol = symbol
        self.weight = weight

    def is_leaf(self) -> bool:
        return True

    def sort_key(self) -> Tuple:
        return (self.weight, 0, self.symbol)

    def leaf_count(self) -> int:
        return 1

    def internal_count(self) -> int:
        return 0

    def depth(self) -> int:
        return 0

    def __repr__(self) -> str:
        return f"LeafNode({self.symbol!r}, {self.weight})"


class InternalNode(HuffmanNode):
    """A node owning a left and a right subtree. Holds no symbol."""
    __slots__ = ("left", "right", "weight", "order")

    def __init__(self, left: HuffmanNode, right: HuffmanNode, order: int = 0) -> None:
        if not isinstance(left, HuffmanNode) or not isinstance(right, HuffmanNode):
            raise ValueError("Children must be of type HuffmanNode")
        self.left = left
        self.right = right
        self.weight = left.weight + right.weight
        # creation sequence, breaks ties between equal-weight internal nodes
        self.order = order

    def is_leaf(self) -> bool:
        return False

    def sort_key(self) -> Tuple:
        return (self.weight, 1, self.order)

    def leaf_count(self) -> int:
        return self.left.leaf_count() + self.right.leaf_count()

    def internal_count(self) -> int:
        return 1 + self.left.internal_count() + self.right.internal_count()

    def depth(self) -> int:
        return 1 + max(self.left.depth(), self.right.depth())

    def __repr__(self) -> str:
        return f"InternalNode({self.left!r}, {self.right!r})"


class CodeTable(abc.Mapping):
    """
    Read-only mapping from each symbol to its code, a non-empty string of
    '0' and '1' characters.
    """
    def __init__(self, codes: Mapping) -> None:
        for symbol, code in codes.items():
            if not isinstance(code, str) or len(code) == 0:
                raise ValueError(f"Code of {symbol!r} must be a non-empty str")
            if code.strip("01"):
                raise ValueError(f"Code of {symbol!r} must contain only '0' and '1'")
        self._codes = MappingProxyType(dict(codes))

    def __getitem__(self, symbol: Any) -> str:
        return self._codes[symbol]

    def __iter__(self) -> Iterator:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"CodeTable({dict(self._codes)!r})"

    def code_lengths(self) -> Dict[Any, int]:
        return {symbol: len(code) for symbol, code in self._codes.items()}

    def is_prefix_free(self) -> bool:
        """
        Check that no code is a prefix of another code.

        Sorting puts any code directly before the codes it prefixes, so only
        neighbours have to be compared.
        """
        codes = sorted(self._codes.values())
        for shorter, longer in zip(codes, codes[1:]):
            if longer.startswith(shorter):
                return False
        return True

    def encoded_length(self, frequencies: Mapping) -> int:
        """
        Get the number of bits needed to encode text with the given frequencies.

        Args:
            frequencies (Mapping): Symbol to count mapping, e.g. a FrequencyTable.

        Returns:
            int: Total encoded length in bits.
        """
        return sum(len(self._codes[symbol]) * count for symbol, count in frequencies.items())


def find_leaf(root: Optional[HuffmanNode], symbol: Any) -> Optional[LeafNode]:
    """
    Find the leaf holding the given symbol.

    Args:
        root (Optional[HuffmanNode]): Root of the tree to search.
        symbol (Any): The symbol to look for.

    Returns:
        Optional[LeafNode]: The leaf, or None if the symbol is not in the tree.
    """
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.is_leaf():
            if node.symbol == symbol:
                return node
        else:
            stack.append(node.right)
            stack.append(node.left)
    return None
