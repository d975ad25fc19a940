import dataclasses
import logging
import pathlib
import sys
from typing import Optional, TextIO

from . import codec, errors, report, store


_logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Session:
    """One batch run over a score store.

    Steps run in a fixed order: load, add, sort, show, stats, save, report.
    Rejected values and failed file operations are reported and the run goes
    on with the store as it was.
    """

    load_path: Optional[pathlib.Path] = None
    add_values: list[float] = dataclasses.field(default_factory=list)
    sort: bool = False
    show: bool = False
    stats: bool = False
    save_path: Optional[pathlib.Path] = None
    report_dir: Optional[pathlib.Path] = None

    def run(
        self,
        score_store: Optional[store.ScoreStore] = None,
        out: Optional[TextIO] = None,
    ) -> store.ScoreStore:
        if out is None:
            out = sys.stdout
        if score_store is None:
            score_store = store.ScoreStore()

        if self.load_path is not None:
            self._load(score_store, self.load_path, out)

        for value in self.add_values:
            try:
                score_store.add(value)
            except errors.OutOfRangeError:
                _logger.warning(f"rejected score {value}")
                print(
                    f"Invalid score {value}: must be between "
                    f"{store.MIN_SCORE} and {store.MAX_SCORE}.",
                    file=out,
                )
                continue
            print(f"Score {value:.2f} added. Total: {len(score_store)}", file=out)

        if self.sort:
            if len(score_store) == 0:
                print("No scores to sort.", file=out)
            else:
                score_store.sort_ascending()
                print("Scores sorted in ascending order.", file=out)

        snapshot = score_store.snapshot()
        if self.show:
            print(report.format_listing(snapshot), file=out)
        if self.stats:
            print(report.summarize(snapshot).format(), file=out)

        if self.save_path is not None:
            try:
                codec.save(self.save_path, snapshot)
            except errors.PersistenceError as e:
                _logger.error(str(e))
                print(f"Failed to save scores to '{self.save_path}'.", file=out)
            else:
                print(f"Saved to '{self.save_path}'.", file=out)

        if self.report_dir is not None:
            try:
                report.write_report(snapshot, self.report_dir)
            except errors.PersistenceError as e:
                _logger.error(str(e))
                print(f"Failed to write report to '{self.report_dir}'.", file=out)
            else:
                print(f"Report written to '{self.report_dir}'.", file=out)

        return score_store

    def _load(
        self, score_store: store.ScoreStore, path: pathlib.Path, out: TextIO
    ) -> None:
        try:
            n = codec.load_into(score_store, path)
        except errors.PersistenceError as e:
            _logger.error(str(e))
            print(f"Failed to load scores from '{path}'.", file=out)
            return
        print(f"Loaded '{path}'. Total scores: {n}", file=out)
