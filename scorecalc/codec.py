"""Plain-text score files: one decimal value per line.

Decoding reads the first number on each line and drops lines that have none
or whose number is not a valid score, so hand-edited files still load.
"""
import logging
import os
import re
from typing import Iterable, Optional, Union

from . import errors, store


PathLike = Union[str, "os.PathLike[str]"]

_logger = logging.getLogger(__name__)

# Leading number in the forms strtod accepts: decimal with optional exponent, or
# a hex float.
_NUMBER = re.compile(
    r"""\s*(?:
        (?P<hex>[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)
        |(?P<dec>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    )""",
    re.VERBOSE | re.ASCII,
)


def encode(scores: Iterable[float]) -> str:
    return "".join(f"{float(x)!r}\n" for x in scores)


def decode(text: str) -> list[float]:
    ret: list[float] = []
    n_skipped = 0
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for lineno, line in enumerate(lines, 1):
        x = parse_leading_number(line)
        if x is None or not store.is_valid_score(x):
            _logger.debug(f"skipping line {lineno}: {line!r}")
            n_skipped += 1
            continue
        ret.append(x)
    if n_skipped:
        _logger.info(f"skipped {n_skipped} malformed or out-of-range line(s)")
    return ret


def parse_leading_number(line: str) -> Optional[float]:
    m = _NUMBER.match(line)
    if m is None:
        return None
    if m.group("hex") is not None:
        return _parse_hex(m.group("hex"))
    return float(m.group("dec"))


def save(path: PathLike, scores: Iterable[float]) -> None:
    xs = list(scores)
    text = encode(xs)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise errors.PersistenceError(path, "cannot write scores") from e
    _logger.info(f"saved {len(xs)} scores to {os.fspath(path)}")


def load(path: PathLike) -> list[float]:
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise errors.PersistenceError(path, "cannot read scores") from e
    scores = decode(text)
    _logger.info(f"loaded {len(scores)} scores from {os.fspath(path)}")
    return scores


def load_into(score_store: store.ScoreStore, path: PathLike) -> int:
    scores = load(path)
    score_store.replace_all(scores)
    return len(score_store)


def _parse_hex(token: str) -> float:
    try:
        return float.fromhex(token)
    except OverflowError:
        return float("-inf") if token.startswith("-") else float("inf")
