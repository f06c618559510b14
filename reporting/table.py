import sys
from typing import Iterable, Optional, TextIO
from experiments.convergence import ErrorStats

class ErrorTableReporter:
    """Writes the error table read by external plotting tools.
    
    One line per checkpoint: the sample count and the average error with six
    fractional digits, optionally followed by the max error.
    """
    
    def __init__(self, stream: Optional[TextIO] = None, stride: int = 4, include_max: bool = False):
        if stride <= 0:
            raise ValueError(f"stride must be positive, got {stride}")
        self.stream = stream
        self.stride = stride
        self.include_max = include_max
    
    def is_checkpoint(self, sample_count: int) -> bool:
        return sample_count % self.stride == 0
    
    def format_line(self, stats: ErrorStats) -> str:
        line = f"{stats.sample_count} {stats.average_error:.6f}"
        if self.include_max:
            line += f" {stats.max_error:.6f}"
        return line
    
    def emit(self, stats: ErrorStats):
        # Resolved per call so output follows a redirected sys.stdout
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(self.format_line(stats) + "\n")
        stream.flush()
    
    def report(self, stats_stream: Iterable[ErrorStats]) -> int:
        """Emit every checkpoint of the stream as it arrives.
        
        Returns:
            Number of lines written
        """
        n_lines = 0
        for stats in stats_stream:
            if self.is_checkpoint(stats.sample_count):
                self.emit(stats)
                n_lines += 1
        return n_lines
