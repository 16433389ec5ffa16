from typing import Any, Optional

import numpy as np

from .validators import validate_type
from .exceptions import MalformedStreamError
from .huffman import HuffmanTreeSettings, build_code_table, build_tree_from_frequencies
from .coders import HuffmanCoder
from .models import CodeTable, FrequencyTable, HuffmanNode
from .preprocessors import BasePreprocessor, BytePreprocessor, CharPreprocessor, get_preprocessor
from .logger import Logger
from .settings import BITS_PER_SYMBOL, VERSION


class CompressionStats:
    """Size and efficiency figures of one compression run."""

    def __init__(self, frequencies: FrequencyTable, code_table: CodeTable,
                 bits_per_symbol: int = BITS_PER_SYMBOL) -> None:
        validate_type(frequencies, "Frequencies", FrequencyTable)
        validate_type(code_table, "Code table", CodeTable)
        validate_type(bits_per_symbol, "Bits per symbol", int)
        if bits_per_symbol <= 0:
            raise ValueError("Bits per symbol must be positive")

        symbols = list(frequencies)
        counts = np.array([frequencies[s] for s in symbols], dtype=np.int64)
        lengths = np.array([len(code_table[s]) for s in symbols], dtype=np.int64)

        self.symbol_count: int = int(counts.sum())
        self.alphabet_size: int = len(symbols)
        self.original_bits: int = self.symbol_count * bits_per_symbol
        self.compressed_bits: int = int(np.dot(counts, lengths)) if symbols else 0

        if self.symbol_count == 0:
            self.compression_ratio = 0.0
            self.entropy = 0.0
            self.average_code_length = 0.0
            self.efficiency = 0.0
            return

        probabilities = counts / self.symbol_count
        self.compression_ratio: float = self.original_bits / self.compressed_bits
        # abs() turns the -0.0 of a one-symbol alphabet into 0.0
        self.entropy: float = abs(float(-np.sum(probabilities * np.log2(probabilities))))
        self.average_code_length: float = self.compressed_bits / self.symbol_count
        self.efficiency: float = self.entropy / self.average_code_length

    def __repr__(self) -> str:
        return (f"CompressionStats(original_bits={self.original_bits}, "
                f"compressed_bits={self.compressed_bits}, "
                f"compression_ratio={self.compression_ratio:.2f})")


class CompressedModel:
    """Represents the in-memory result of a compression run."""

    def __init__(
        self,
        preprocessor_code: int,
        version: int,
        tree: Optional[HuffmanNode],
        code_table: CodeTable,
        frequencies: FrequencyTable,
        bits: str,
    ) -> None:
        validate_type(preprocessor_code, "Preprocessor code", int)
        validate_type(version, "Version", int)
        if tree is not None:
            validate_type(tree, "Tree", HuffmanNode)
        validate_type(code_table, "Code table", CodeTable)
        validate_type(frequencies, "Frequencies", FrequencyTable)
        validate_type(bits, "Bits", str)

        get_preprocessor(preprocessor_code)

        if version != VERSION:
            raise ValueError("Version not supported")

        self.preprocessor_code = preprocessor_code
        self.version = version
        self.tree = tree
        self.code_table = code_table
        self.frequencies = frequencies
        self.bits = bits

    def stats(self, bits_per_symbol: int = BITS_PER_SYMBOL) -> CompressionStats:
        return CompressionStats(self.frequencies, self.code_table, bits_per_symbol)


class HuffmanCodec:
    def __init__(self, settings: Optional[HuffmanTreeSettings] = None) -> None:
        if settings is not None:
            validate_type(settings, "Settings", HuffmanTreeSettings)
        self.settings: Optional[HuffmanTreeSettings] = settings

    def compress(
        self,
        data: Any,
        preprocessor: BasePreprocessor,
        logger: Optional[Logger] = None,
    ) -> CompressedModel:
        """
        Compress the input data.

        Empty data needs no tree; it compresses to a model without one and an
        empty stream.

        Args:
            data: The data to compress, of the type the preprocessor accepts.
            preprocessor: An instance of BasePreprocessor.
            logger: Logger instance for logging.

        Returns:
            CompressedModel: The resulting compressed model.
        """
        if not isinstance(preprocessor, BasePreprocessor):
            raise ValueError("Preprocessor must be an instance of BasePreprocessor")

        syms, frequencies = preprocessor.convert_to_symbols(data)
        if not syms:
            return CompressedModel(preprocessor.code, VERSION, None, CodeTable({}), frequencies, "")

        tree = build_tree_from_frequencies(frequencies, self.settings, logger)
        code_table = build_code_table(tree)
        bits = HuffmanCoder(logger).encode(syms, code_table)
        return CompressedModel(preprocessor.code, VERSION, tree, code_table, frequencies, bits)

    def decompress(self, compressed_model: CompressedModel, logger: Optional[Logger] = None) -> Any:
        """
        Decompress the encoded data.

        Args:
            compressed_model (CompressedModel): The compressed model.
            logger: Logger instance for logging.

        Returns:
            The decompressed data, of the type the model's preprocessor produces.
        """
        if not isinstance(compressed_model, CompressedModel):
            raise ValueError("Input must be a CompressedModel instance")
        if compressed_model.version != VERSION:
            raise ValueError("Version not supported")

        preprocessor = get_preprocessor(compressed_model.preprocessor_code, logger=logger)
        if compressed_model.tree is None:
            if compressed_model.bits:
                raise MalformedStreamError("Stream is not empty but the model has no tree", 0)
            return preprocessor.empty()

        syms = HuffmanCoder(logger).decode(compressed_model.bits, compressed_model.tree)
        return preprocessor.convert_from_symbols(syms)


class HuffmanCodecText(HuffmanCodec):
    def compress(self, data: str, logger: Optional[Logger] = None) -> CompressedModel:
        """
        Compress a str, one symbol per character.

        Args:
            data (str): The text to compress.
            logger: Logger instance for logging.

        Returns:
            CompressedModel: The compressed model.
        """
        return super().compress(data, CharPreprocessor(logger), logger)


class HuffmanCodecByte(HuffmanCodec):
    def compress(self, data: bytes, logger: Optional[Logger] = None) -> CompressedModel:
        """
        Compress bytes, one symbol per byte.

        Args:
            data (bytes): The data to compress.
            logger: Logger instance for logging.

        Returns:
            CompressedModel: The compressed model.
        """
        return super().compress(data, BytePreprocessor(logger), logger)
