from . import codec, errors, log_util, report, session, sort_util, stats, store
from .errors import IndexOutOfBoundsError, OutOfRangeError, PersistenceError, ScoreError
from .log_util import setup_logger
from .session import Session
from .store import INITIAL_CAPACITY, MAX_SCORE, MIN_SCORE, ScoreStore
