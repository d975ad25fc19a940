import logging
import pathlib
from typing import Optional


def setup_logger(
    log_file: Optional[pathlib.Path] = None, level: int = logging.INFO
) -> None:
    fmt = "[%(process)s|%(asctime)s(%(name)s)%(levelname)s] %(message)s"
    if log_file is None:
        logging.basicConfig(format=fmt, level=level)
    else:
        logging.basicConfig(
            filename=str(log_file), filemode="w", format=fmt, level=level
        )
