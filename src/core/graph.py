"""Graph data model and data sources."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
import numpy as np
import yaml

Sample = Tuple[float, float]
Samples = Sequence[Sample] | np.ndarray


class Graph:
    """
    A named series of samples.

    The graph only references the most recently supplied sequence;
    samples are swapped wholesale, never mutated in place.
    """

    def __init__(self, name: str, samples: Optional[Samples] = None) -> None:
        self._name = name
        self._samples = samples

    @property
    def name(self) -> str:
        """Display label."""
        return self._name

    @property
    def samples(self) -> Optional[Samples]:
        """Current sample sequence (may be None)."""
        return self._samples

    @property
    def is_empty(self) -> bool:
        return self._samples is None or len(self._samples) == 0

    def update_data(self, samples: Optional[Samples]) -> None:
        """Replace the referenced sample sequence."""
        self._samples = samples


class DataSource(ABC):
    """Anything that can supply the current samples for a graph."""

    @abstractmethod
    def get_samples(self) -> Optional[Samples]:
        """Return the samples to plot."""
        pass


class ArrayDataSource(DataSource):
    """Data source backed by an in-memory array of samples."""

    def __init__(self, graph_data: Optional[Samples] = None) -> None:
        self.graph_data = graph_data

    def get_samples(self) -> Optional[Samples]:
        return self.graph_data

    def set_samples(self, graph_data: Optional[Samples]) -> None:
        self.graph_data = graph_data

    @classmethod
    def from_yaml(cls, path: Path | str) -> "ArrayDataSource":
        """
        Load samples from a YAML file.

        The file holds either a list of [x, y] pairs or a mapping with a
        ``samples`` key containing that list.

        Raises:
            ValueError: If a row is not a pair of numbers
        """
        with open(path) as f:
            data = yaml.safe_load(f) or []

        if isinstance(data, dict):
            data = data.get("samples", [])

        samples: List[Sample] = []
        for i, row in enumerate(data):
            try:
                x, y = row
                samples.append((float(x), float(y)))
            except (TypeError, ValueError) as e:
                raise ValueError(f"Sample {i} in {path} is not an [x, y] pair: {row!r}") from e

        return cls(samples)


def demo_samples(count: int = 40, seed: int | None = None) -> np.ndarray:
    """Generate a noisy sine series for the demo window."""
    rng = np.random.default_rng(seed)
    x = np.arange(count, dtype=np.float64)
    y = 50.0 + 30.0 * np.sin(x / 4.0) + rng.normal(0.0, 4.0, count)
    return np.column_stack((x, y))
