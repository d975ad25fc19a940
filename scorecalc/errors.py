import os
from typing import Union


class ScoreError(Exception):
    pass


class OutOfRangeError(ScoreError, ValueError):
    def __init__(self, value: object, low: float, high: float) -> None:
        super().__init__(f"score out of range [{low}, {high}]: {value!r}")
        self.value = value


class IndexOutOfBoundsError(ScoreError, IndexError):
    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"index {index} out of bounds for {count} scores")
        self.index = index
        self.count = count


class PersistenceError(ScoreError, OSError):
    def __init__(self, path: Union[str, "os.PathLike[str]"], reason: str) -> None:
        super().__init__(f"{reason}: {os.fspath(path)}")
        self.path = path
