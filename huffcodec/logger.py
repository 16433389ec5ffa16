"""
logger.py

Logging module for huffcodec.


"""


from datetime import datetime
from typing import Any, Union, Optional

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class TreeMergeLog(Log):
    def __init__(self, left_weight: int, right_weight: int) -> None:
        self.left_weight = left_weight
        self.right_weight = right_weight
        self.merged_weight = left_weight + right_weight
        super().__init__("Tree_merge_log", LogLevel.INFO,
                         f"Left: {left_weight}, Right: {right_weight}, Merged: {self.merged_weight}")


class ForcedPairLog(Log):
    def __init__(self, first: Any, second: Any) -> None:
        self.first = first
        self.second = second
        super().__init__("Forced_pair_log", LogLevel.WARNING,
                         f"Legacy rule merged {first!r} and {second!r} before frequency ordering")


class CodingLog(Log):
    def __init__(self, symbol_count: int, encoded_size: int) -> None:
        self.symbol_count = symbol_count
        self.encoded_size = encoded_size
        super().__init__("Coding_log", LogLevel.INFO, f"Symbol count: {symbol_count}, Encoded size: {encoded_size}")


class ProgressStep(Log):
    """Base for progress records; the logger numbers them per type."""
    type_name = "Progress_step"

    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__(self.type_name, LogLevel.PROGRESS, message)


class PreprocessingProgressStep(ProgressStep):
    type_name = "Preprocessing_progress_step"


class TreeBuildingProgressStep(ProgressStep):
    type_name = "Tree_building_progress_step"


class CodingProgressStep(ProgressStep):
    type_name = "Coding_progress_step"


class Logger:
    def __init__(self) -> None:
        self.preproc_progress_count = 0
        self.tree_progress_count = 0
        self.coding_progress_count = 0

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.preprocessor_step_interval_count = 10000
        self.tree_step_interval_count = 100
        self.coding_step_interval_count = 10000

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS:
            self._log_progress(log)

    def _log_progress(self, log: Log) -> None:
        if isinstance(log, PreprocessingProgressStep):
            self.preproc_progress_count += 1
            count = self.preproc_progress_count
            interval = self.preprocessor_step_interval_count
        elif isinstance(log, TreeBuildingProgressStep):
            self.tree_progress_count += 1
            count = self.tree_progress_count
            interval = self.tree_step_interval_count
        elif isinstance(log, CodingProgressStep):
            self.coding_progress_count += 1
            count = self.coding_progress_count
            interval = self.coding_step_interval_count
        else:
            if self.record_progress:
                self.logs.append(log)
            return

        if log.total_steps is not None:
            log.message = f"{log.base_message} ({count}/{log.total_steps})"
        else:
            log.message = f"{log.base_message} ({count})"
        if self.record_progress:
            self.logs.append(log)
        if self.display_progress and (count % interval == 0):
            print(log)

    def get_logs(self, log_type: Optional[type] = None) -> list:
        if log_type is None:
            return list(self.logs)
        return [log for log in self.logs if isinstance(log, log_type)]

    def clear(self) -> None:
        self.logs = []
        self.preproc_progress_count = 0
        self.tree_progress_count = 0
        self.coding_progress_count = 0

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
