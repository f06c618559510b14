import logging
import numpy as np
from typing import Iterator
from dataclasses import dataclass
from integrands.base import Integrand
from corpus.base import Corpus

logger = logging.getLogger(__name__)

@dataclass
class ErrorStats:
    """Cross-sequence error statistics after one more sample per sequence."""
    sample_count: int
    average_error: float
    max_error: float
    errors: np.ndarray

@dataclass
class ConvergenceData:
    """Container for convergence analysis results."""
    sample_counts: np.ndarray
    average_errors: np.ndarray
    max_errors: np.ndarray

class RunningState:
    """Per-sequence running sums of integrand values.
    
    A sequence only accumulates while it still has valid samples; after that
    its sum and count stay frozen at the last valid sample.
    """
    
    def __init__(self, n_sequences: int):
        self.sums = np.zeros(n_sequences)
        self.counts = np.zeros(n_sequences, dtype=np.int64)
    
    def update(self, values: np.ndarray, valid: np.ndarray):
        self.sums[valid] += values
        self.counts[valid] += 1
    
    def estimates(self) -> np.ndarray:
        # Sequences without any valid sample estimate 0
        return np.divide(self.sums, self.counts, out=np.zeros_like(self.sums),
                         where=self.counts > 0)

class ConvergenceEstimator:
    """Tracks Monte Carlo integration error of an integrand over many sample sequences."""
    
    def __init__(self, integrand: Integrand):
        self.integrand = integrand
    
    def iter_errors(self, corpus: Corpus) -> Iterator[ErrorStats]:
        """
        Stream error statistics for sample counts 1 .. corpus.n_samples.
        
        At every sample index each sequence adds the integrand value of its
        next point to its running sum, and the absolute errors of all running
        estimates against the reference value are aggregated.
        
        Args:
            corpus: Sample sequences to integrate with
            
        Yields:
            ErrorStats for each sample count, in increasing order
        """
        reference = self.integrand.reference_value
        state = RunningState(corpus.n_sequences)
        n_empty = int(np.count_nonzero(corpus.lengths == 0))
        if n_empty:
            logger.warning("%d of %d sequences hold no samples; each counts with estimate 0 "
                           "and adds error %.6f to every average", n_empty, corpus.n_sequences, abs(reference))
        logger.debug("Estimating %s (reference %.8f) over %d sequences of %d samples",
                     self.integrand.name, reference, corpus.n_sequences, corpus.n_samples)
        
        for s in range(corpus.n_samples):
            valid = corpus.lengths > s
            samples = corpus.points[valid, s]
            values = self.integrand.evaluate(samples[:, 0], samples[:, 1])
            state.update(values, valid)
            
            errors = np.abs(state.estimates() - reference)
            yield ErrorStats(
                sample_count=s + 1,
                average_error=float(np.mean(errors)),
                max_error=float(np.max(errors)),
                errors=errors,
            )
    
    def analyze(self, corpus: Corpus) -> ConvergenceData:
        """
        Collect the full error curve.
        
        Returns:
            ConvergenceData with one entry per sample count
        """
        sample_counts = np.arange(1, corpus.n_samples + 1)
        average_errors = np.zeros(corpus.n_samples)
        max_errors = np.zeros(corpus.n_samples)
        
        for i, stats in enumerate(self.iter_errors(corpus)):
            average_errors[i] = stats.average_error
            max_errors[i] = stats.max_error
            
        return ConvergenceData(
            sample_counts=sample_counts,
            average_errors=average_errors,
            max_errors=max_errors
        )
