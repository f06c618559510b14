from dataclasses import dataclass
from typing import List
import numpy as np

# Capacity of the fixed sample table the corpus files were designed around
MAX_CORPUS_POINTS = 4096 * 10000

class FileOpenError(OSError):
    """Raised when a corpus file cannot be opened for reading."""
    
    def __init__(self, path: str, reason: str = ""):
        super().__init__(f"cannot open file '{path}'" + (f": {reason}" if reason else ""))
        self.path = path

class CorpusTooLargeError(ValueError):
    """Raised when the declared corpus shape exceeds MAX_CORPUS_POINTS."""

class TruncatedSequenceError(ValueError):
    """Raised when a sequence holds fewer points than declared and truncation is not allowed."""
    
    def __init__(self, sequence_index: int, length: int, n_samples: int):
        super().__init__(
            f"sequence {sequence_index} has {length} of {n_samples} declared samples"
        )
        self.sequence_index = sequence_index
        self.length = length
        self.n_samples = n_samples

def check_corpus_shape(n_samples: int, n_sequences: int, max_points: int = MAX_CORPUS_POINTS):
    """Validate declared corpus dimensions before allocating the point table."""
    if n_samples <= 0 or n_sequences <= 0:
        raise ValueError(f"numSamples and numSequences must be positive, got {n_samples} and {n_sequences}")
    if n_samples * n_sequences > max_points:
        raise CorpusTooLargeError(
            f"{n_sequences} sequences of {n_samples} samples exceed the limit of {max_points} points"
        )

@dataclass(frozen=True)
class Corpus:
    """Sample sequences loaded from one corpus file.
    
    Attributes:
        points: Array of shape (n_sequences, n_samples, 2). Slots past a
            sequence's length are NaN and never evaluated.
        lengths: Number of points actually read for each sequence
    """
    points: np.ndarray
    lengths: np.ndarray
    
    def __post_init__(self):
        if self.points.ndim != 3 or self.points.shape[2] != 2:
            raise ValueError(f"points must have shape (n_sequences, n_samples, 2), got {self.points.shape}")
        if self.lengths.shape != (self.points.shape[0],):
            raise ValueError(f"lengths must have shape ({self.points.shape[0]},), got {self.lengths.shape}")
        self.points.setflags(write=False)
        self.lengths.setflags(write=False)
    
    @classmethod
    def from_points(cls, points: np.ndarray) -> "Corpus":
        """Build a corpus where every sequence is complete."""
        points = np.array(points, dtype=np.float64)
        return cls(points=points, lengths=np.full(points.shape[0], points.shape[1], dtype=np.int64))
    
    @property
    def n_sequences(self) -> int:
        return self.points.shape[0]
    
    @property
    def n_samples(self) -> int:
        return self.points.shape[1]
    
    @property
    def truncated_sequences(self) -> List[int]:
        """Indices of sequences holding fewer points than n_samples."""
        return [int(t) for t in np.flatnonzero(self.lengths < self.n_samples)]
    
    def sequence(self, index: int) -> np.ndarray:
        """Valid points of one sequence, shape (length, 2)."""
        return self.points[index, :self.lengths[index]]
