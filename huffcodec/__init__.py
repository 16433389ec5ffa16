"""
huffcodec: A Python library for deterministic Huffman compression and decompression.
"""

from .codecs import (
    CompressedModel,
    CompressionStats,
    HuffmanCodec,
    HuffmanCodecText,
    HuffmanCodecByte,
)

from .coders import (
    CoderBase,
    HuffmanCoder,
    encode,
    decode,
    get_coder,
)

from .huffman import (
    HuffmanTreeSettings,
    count_frequencies,
    merge_frequencies,
    build_tree,
    build_tree_from_frequencies,
    build_code_table,
)

from .models import (
    Symbol,
    SymbolFrequency,
    FrequencyTable,
    HuffmanNode,
    LeafNode,
    InternalNode,
    CodeTable,
    find_leaf,
)

from .preprocessors import (
    BasePreprocessor,
    CharPreprocessor,
    BytePreprocessor,
    get_preprocessor,
)

from .exceptions import (
    HuffmanError,
    EmptyInputError,
    SymbolNotInTableError,
    MalformedStreamError,
)

from .settings import VERSION, BITS_PER_SYMBOL, LEGACY_FORCED_PAIR

from .logger import (
    Logger,
    Log,
    LogLevel,
    TreeMergeLog,
    ForcedPairLog,
    CodingLog,
    PreprocessingProgressStep,
    TreeBuildingProgressStep,
    CodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "CompressedModel",
    "CompressionStats",
    "HuffmanCodec",
    "HuffmanCodecText",
    "HuffmanCodecByte",

    "CoderBase",
    "HuffmanCoder",
    "encode",
    "decode",
    "get_coder",

    "HuffmanTreeSettings",
    "count_frequencies",
    "merge_frequencies",
    "build_tree",
    "build_tree_from_frequencies",
    "build_code_table",

    "Symbol",
    "SymbolFrequency",
    "FrequencyTable",
    "HuffmanNode",
    "LeafNode",
    "InternalNode",
    "CodeTable",
    "find_leaf",

    "BasePreprocessor",
    "CharPreprocessor",
    "BytePreprocessor",
    "get_preprocessor",

    "HuffmanError",
    "EmptyInputError",
    "SymbolNotInTableError",
    "MalformedStreamError",

    "VERSION",
    "BITS_PER_SYMBOL",
    "LEGACY_FORCED_PAIR",

    "Logger",
    "Log",
    "LogLevel",
    "TreeMergeLog",
    "ForcedPairLog",
    "CodingLog",
    "PreprocessingProgressStep",
    "TreeBuildingProgressStep",
    "CodingProgressStep",
]
