"""
huffman.py

Frequency counting, Huffman tree construction and code table generation.

Tree construction is deterministic: the merge heap orders nodes by weight,
then leaves before internal nodes, then leaves by symbol and internal nodes
by the order they were created in. Two runs over the same frequencies
always produce the same tree and therefore the same codes.
"""


import heapq
import itertools
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .exceptions import EmptyInputError
from .logger import Logger, ForcedPairLog, TreeMergeLog, TreeBuildingProgressStep
from .models import CodeTable, FrequencyTable, HuffmanNode, InternalNode, LeafNode, Symbol
from .settings import LEGACY_FORCED_PAIR


class HuffmanTreeSettings:
    """
    Settings for the tree builder.

    forced_pair: optional (first, second) symbols that are merged into one
    internal node before the frequency-ordered merge loop whenever both occur
    in the input, first on the left. This reproduces a legacy special case
    and gives non-minimal codes in general; leave it as None for plain
    Huffman coding.
    """

    def __init__(self, forced_pair: Optional[Tuple[Any, Any]] = None) -> None:
        if forced_pair is not None:
            if not isinstance(forced_pair, tuple) or len(forced_pair) != 2:
                raise ValueError("forced_pair must be a tuple of two symbols")
            if forced_pair[0] == forced_pair[1]:
                raise ValueError("forced_pair must name two different symbols")
        self.forced_pair: Optional[Tuple[Any, Any]] = forced_pair

    @classmethod
    def legacy(cls) -> "HuffmanTreeSettings":
        return cls(forced_pair=LEGACY_FORCED_PAIR)


def count_frequencies(symbols: Iterable[Any]) -> FrequencyTable:
    """
    Count how often each distinct symbol occurs.

    Args:
        symbols (Iterable[Any]): The input sequence, e.g. a str or a list of Symbol.

    Returns:
        FrequencyTable: Counts for exactly the symbols present. Empty when the input is empty.
    """
    freq_dict = defaultdict(int)
    for sym in symbols:
        freq_dict[sym] += 1
    return FrequencyTable(freq_dict)


def merge_frequencies(*tables: FrequencyTable) -> FrequencyTable:
    """
    Combine tables counted over disjoint parts of one text.

    Args:
        *tables (FrequencyTable): The partial counts.

    Returns:
        FrequencyTable: The summed counts.
    """
    merged = FrequencyTable({})
    for table in tables:
        merged = merged.merge(table)
    return merged


def _same_symbol(symbol: Any, target: Any) -> bool:
    if isinstance(symbol, Symbol) and not isinstance(target, Symbol):
        return symbol.data == target
    return symbol == target


def _apply_forced_pair(heap: List[HuffmanNode],
                       forced_pair: Tuple[Any, Any],
                       order: "itertools.count",
                       logger: Optional[Logger]) -> List[HuffmanNode]:
    first, second = forced_pair
    first_leaf = second_leaf = None
    for node in heap:
        if _same_symbol(node.symbol, first):
            first_leaf = node
        elif _same_symbol(node.symbol, second):
            second_leaf = node
    if first_leaf is None or second_leaf is None:
        return heap

    rest = [node for node in heap if node is not first_leaf and node is not second_leaf]
    rest.append(InternalNode(first_leaf, second_leaf, next(order)))
    if logger is not None:
        logger.log(ForcedPairLog(first, second))
        logger.log(TreeMergeLog(first_leaf.weight, second_leaf.weight))
    return rest


def build_tree_from_frequencies(frequencies: Mapping,
                                settings: Optional[HuffmanTreeSettings] = None,
                                logger: Optional[Logger] = None) -> HuffmanNode:
    """
    Build a Huffman tree from symbol frequencies.

    Args:
        frequencies (Mapping): Symbol to positive count, usually a FrequencyTable.
        settings (Optional[HuffmanTreeSettings]): Builder settings, plain Huffman when None.
        logger (Optional[Logger]): Receives a TreeMergeLog per merge.

    Returns:
        HuffmanNode: The root. A single LeafNode when only one symbol is present.

    Raises:
        EmptyInputError: If there are no frequencies.
    """
    if not isinstance(frequencies, FrequencyTable):
        frequencies = FrequencyTable(frequencies)
    if len(frequencies) == 0:
        raise EmptyInputError()
    if settings is None:
        settings = HuffmanTreeSettings()

    heap: List[HuffmanNode] = [LeafNode(sym, freq) for sym, freq in frequencies.items()]
    if len(heap) == 1:
        return heap[0]

    order = itertools.count()
    if settings.forced_pair is not None:
        heap = _apply_forced_pair(heap, settings.forced_pair, order, logger)
    heapq.heapify(heap)

    total_merges = len(heap) - 1
    while len(heap) > 1:
        node1 = heapq.heappop(heap)
        node2 = heapq.heappop(heap)
        left, right = node1, node2
        if (node1.weight == node2.weight and node1.is_leaf() and node2.is_leaf()
                and node2.symbol < node1.symbol):
            left, right = node2, node1
        heapq.heappush(heap, InternalNode(left, right, next(order)))
        if logger is not None:
            logger.log(TreeMergeLog(left.weight, right.weight))
            logger.log(TreeBuildingProgressStep("Merging nodes", total_merges))
    return heap[0]


def build_tree(symbols: Iterable[Any],
               settings: Optional[HuffmanTreeSettings] = None,
               logger: Optional[Logger] = None) -> HuffmanNode:
    """
    Build the Huffman tree for a symbol sequence.

    Args:
        symbols (Iterable[Any]): The text, e.g. a str or a list of Symbol.
        settings (Optional[HuffmanTreeSettings]): Builder settings, plain Huffman when None.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        HuffmanNode: The root of the tree.

    Raises:
        EmptyInputError: If the sequence is empty.
    """
    return build_tree_from_frequencies(count_frequencies(symbols), settings, logger)


def build_code_table(root: HuffmanNode) -> CodeTable:
    """
    Assign every leaf symbol its root-to-leaf path, '0' for left and '1' for right.

    A tree that is a single leaf has no edges, its symbol gets the code "0".

    Args:
        root (HuffmanNode): Root of a built tree.

    Returns:
        CodeTable: The codes.
    """
    if not isinstance(root, HuffmanNode):
        raise ValueError("Root must be of type HuffmanNode")

    codes: Dict[Any, str] = {}
    def build_codes(node: HuffmanNode, code: str = '') -> None:
        if node.is_leaf():
            codes[node.symbol] = code or '0'
        else:
            build_codes(node.left, code + '0')
            build_codes(node.right, code + '1')
    build_codes(root)
    return CodeTable(codes)
