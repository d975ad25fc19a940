from __future__ import annotations
import dataclasses
import json
import pathlib
from typing import Sequence, Union

from matplotlib import pyplot
import numpy
import pandas
import seaborn

from . import errors, stats, store


NO_SCORES = "No scores recorded."


@dataclasses.dataclass(frozen=True)
class Summary:
    count: int
    mean: float
    maximum: float
    minimum: float
    population_std: float

    def save(self, path: Union[str, pathlib.Path]) -> None:
        with open(path, "w") as f:
            json.dump(dataclasses.asdict(self), f, indent=4)

    @staticmethod
    def load(path: Union[str, pathlib.Path]) -> Summary:
        with open(path, "r") as f:
            j = json.load(f)
        return Summary(**j)

    def format(self) -> str:
        if self.count == 0:
            return NO_SCORES
        return "\n".join([
            f"Mean: {self.mean:.2f}",
            f"Highest: {self.maximum:.2f}",
            f"Lowest: {self.minimum:.2f}",
            f"Standard deviation: {self.population_std:.2f}",
        ])


def summarize(scores: Sequence[float]) -> Summary:
    return Summary(
        count=len(scores),
        mean=stats.mean(scores),
        maximum=stats.maximum(scores),
        minimum=stats.minimum(scores),
        population_std=stats.population_std(scores),
    )


def format_listing(scores: Sequence[float]) -> str:
    if not scores:
        return NO_SCORES
    lines = [f"Scores (total {len(scores)}):"]
    lines += [f"{i:3d}: {x:.2f}" for i, x in enumerate(scores, 1)]
    return "\n".join(lines)


def plot_distribution(
    scores: Sequence[float], out_dir: Union[str, pathlib.Path]
) -> pathlib.Path:
    out_path = pathlib.Path(out_dir) / "distribution.png"
    bins = numpy.linspace(store.MIN_SCORE, store.MAX_SCORE, 11)
    df = pandas.DataFrame({"score": list(scores)})

    seaborn.set_style("darkgrid")
    fg = seaborn.displot(x="score", data=df, bins=bins)
    fg.set(xlim=(store.MIN_SCORE, store.MAX_SCORE))
    fg.savefig(out_path)
    pyplot.close(fg.figure)
    return out_path


def write_report(
    scores: Sequence[float], out_dir: Union[str, pathlib.Path]
) -> Summary:
    out_dir = pathlib.Path(out_dir)
    summary = summarize(scores)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        summary.save(out_dir / "summary.json")
        if scores:
            plot_distribution(scores, out_dir)
    except OSError as e:
        raise errors.PersistenceError(out_dir, "cannot write report") from e
    return summary
