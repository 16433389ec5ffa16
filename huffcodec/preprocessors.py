import abc
from typing import Any, List, Optional, Tuple

from .huffman import count_frequencies
from .models import Symbol, FrequencyTable
from .logger import Logger, PreprocessingProgressStep


class BasePreprocessor(abc.ABC):
    @property
    @abc.abstractmethod
    def code(self) -> int:
        """Return the unique identification code for the preprocessor."""
        pass

    @property
    @abc.abstractmethod
    def data_type(self) -> type:
        """Return the type of raw data the preprocessor accepts and produces."""
        pass

    @abc.abstractmethod
    def convert_to_symbols(self, data: Any) -> Tuple[List[Symbol], FrequencyTable]:
        """
        Convert raw data to a list of symbols and count their frequencies.

        Args:
            data (Any): The input data.

        Returns:
            Tuple[List[Symbol], FrequencyTable]: The symbols and their frequency table.
        """
        pass

    @abc.abstractmethod
    def convert_from_symbols(self, symbols: List[Symbol]) -> Any:
        """
        Convert a list of symbols back to raw data.

        Args:
            symbols (List[Symbol]): The list of symbols.

        Returns:
            Any: The reconstructed data.
        """
        pass

    def empty(self) -> Any:
        return self.data_type()

    def _log_progress(self, total: int) -> None:
        if self.logger is not None:
            self.logger.log(PreprocessingProgressStep("Converting data to symbols", total))


class CharPreprocessor(BasePreprocessor):
    """
    Character Preprocessor: Each character of a str is assigned to a symbol.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    def code(self) -> int:
        return 1

    @property
    def data_type(self) -> type:
        return str

    def convert_to_symbols(self, data: str) -> Tuple[List[Symbol], FrequencyTable]:
        if not isinstance(data, str):
            raise ValueError("Data should be in form of str")

        symbols: List[Symbol] = []
        cache = {}
        for char in data:
            if char not in cache:
                cache[char] = Symbol(char)
            symbols.append(cache[char])
            self._log_progress(len(data))

        return symbols, count_frequencies(symbols)

    def convert_from_symbols(self, symbols: List[Symbol]) -> str:
        return ''.join(symbol.data for symbol in symbols)


class BytePreprocessor(BasePreprocessor):
    """
    Byte Preprocessor: Each byte of data is assigned to a symbol.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    def code(self) -> int:
        return 3

    @property
    def data_type(self) -> type:
        return bytes

    def convert_to_symbols(self, data: bytes) -> Tuple[List[Symbol], FrequencyTable]:
        if not isinstance(data, bytes):
            raise ValueError("Data should be in form of bytes")

        symbols: List[Symbol] = []
        cache = {}
        for b in data:
            if b not in cache:
                cache[b] = Symbol(bytes([b]))
            symbols.append(cache[b])
            self._log_progress(len(data))

        return symbols, count_frequencies(symbols)

    def convert_from_symbols(self, symbols: List[Symbol]) -> bytes:
        return b''.join(symbol.data for symbol in symbols)


def get_preprocessor(code: int, logger: Optional[Logger] = None) -> BasePreprocessor:
    """
    Retrieve a preprocessor instance based on the given code.

    Args:
        code (int): The preprocessor code.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        BasePreprocessor: An instance of a preprocessor.

    Raises:
        ValueError: If the preprocessor code is not supported.
    """
    if code == 1:
        return CharPreprocessor(logger)
    elif code == 3:
        return BytePreprocessor(logger)
    else:
        raise ValueError("Preprocessor code not supported")
