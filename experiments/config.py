from dataclasses import dataclass
from corpus.base import MAX_CORPUS_POINTS, check_corpus_shape
from corpus.reader import TRUNCATION_POLICIES

DEFAULT_NUM_SAMPLES = 1024
DEFAULT_NUM_SEQUENCES = 100
CHECKPOINT_STRIDE = 4

@dataclass
class RunConfig:
    """Parameters of one convergence run."""
    function_name: str
    samples_filename: str
    n_samples: int = DEFAULT_NUM_SAMPLES
    n_sequences: int = DEFAULT_NUM_SEQUENCES
    checkpoint_stride: int = CHECKPOINT_STRIDE
    truncation: str = "clamp"
    max_points: int = MAX_CORPUS_POINTS
    
    def __post_init__(self):
        check_corpus_shape(self.n_samples, self.n_sequences, self.max_points)
        if self.checkpoint_stride <= 0:
            raise ValueError(f"checkpoint_stride must be positive, got {self.checkpoint_stride}")
        if self.truncation not in TRUNCATION_POLICIES:
            raise ValueError(f"truncation must be one of {TRUNCATION_POLICIES}, got {self.truncation!r}")
