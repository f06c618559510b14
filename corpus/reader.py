"""Reader for text files holding many independent 2D sample sequences.

File layout::

    // Table of 100 sequences of 1024 uniform random 2D samples
    // Each sample is generated with drand48().
    // Sequence 0:
    0.000000000000 0.000985394675
    0.041631001595 0.176642642543
    ...
    // Sequence 1:
    ...

The first three lines are skipped. Each sequence is then read as a run of
whitespace separated ``x y`` pairs, so a pair may share or span lines. After
the last pair the rest of its line and one separator line are skipped.

If a pair cannot be parsed (end of input or a non-numeric token) the sequence
ends at the last good pair. When a token stopped it, the line holding that
token is taken as the separator line, so the next sequence starts on the
following line.
"""
import logging
import re
from enum import Enum
from typing import Optional, Tuple
import numpy as np
from .base import (
    Corpus, FileOpenError, TruncatedSequenceError, MAX_CORPUS_POINTS, check_corpus_shape,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s*", re.ASCII)
_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

TRUNCATION_POLICIES = ("clamp", "strict")

class ReaderState(Enum):
    IN_HEADER = "in_header"
    IN_SEQUENCE_BODY = "in_sequence_body"
    IN_SEQUENCE_SEPARATOR = "in_sequence_separator"
    DONE = "done"

class CorpusReader:
    """Parses a corpus file into a Corpus of fixed declared shape."""
    
    HEADER_LINES = 3
    SEPARATOR_LINES = 2
    
    def __init__(self, n_samples: int, n_sequences: int, truncation: str = "clamp",
                 max_points: int = MAX_CORPUS_POINTS):
        """
        Args:
            n_samples: Number of points to read per sequence
            n_sequences: Number of sequences to read
            truncation: 'clamp' keeps short sequences, 'strict' raises
                TruncatedSequenceError on the first short sequence
            max_points: Upper bound on n_samples * n_sequences
        """
        if truncation not in TRUNCATION_POLICIES:
            raise ValueError(f"truncation must be one of {TRUNCATION_POLICIES}, got {truncation!r}")
        check_corpus_shape(n_samples, n_sequences, max_points)
        self.n_samples = n_samples
        self.n_sequences = n_sequences
        self.truncation = truncation
        self._text = ""
        self._pos = 0
    
    def read(self, path: str) -> Corpus:
        """Read and parse a corpus file.
        
        Raises:
            FileOpenError: if the file cannot be opened or read
        """
        try:
            # Only ASCII numbers are interpreted; any other byte decodes to U+FFFD
            with open(path, "r", encoding="ascii", errors="replace") as f:
                text = f.read()
        except OSError as e:
            raise FileOpenError(str(path), e.strerror or str(e)) from e
        
        corpus = self.parse(text)
        logger.info("Loaded %d sequences of %d samples from %s",
                    corpus.n_sequences, corpus.n_samples, path)
        return corpus
    
    def parse(self, text: str) -> Corpus:
        """Parse corpus text already held in memory."""
        points = np.full((self.n_sequences, self.n_samples, 2), np.nan)
        lengths = np.zeros(self.n_sequences, dtype=np.int64)
        
        self._text = text
        self._pos = 0
        state = ReaderState.IN_HEADER
        t = 0
        truncated = False
        
        while state is not ReaderState.DONE:
            if state is ReaderState.IN_HEADER:
                self._skip_lines(self.HEADER_LINES)
                state = ReaderState.IN_SEQUENCE_BODY
            
            elif state is ReaderState.IN_SEQUENCE_BODY:
                lengths[t] = self._read_body(points[t])
                truncated = lengths[t] < self.n_samples
                if truncated:
                    self._handle_truncation(t, int(lengths[t]))
                state = ReaderState.IN_SEQUENCE_SEPARATOR
            
            elif state is ReaderState.IN_SEQUENCE_SEPARATOR:
                # A stopping token sits on the separator line itself
                self._skip_lines(1 if truncated else self.SEPARATOR_LINES)
                t += 1
                state = ReaderState.DONE if t == self.n_sequences else ReaderState.IN_SEQUENCE_BODY
        
        self._text = ""
        return Corpus(points=points, lengths=lengths)
    
    def _read_body(self, out: np.ndarray) -> int:
        for s in range(self.n_samples):
            pair = self._next_pair()
            if pair is None:
                return s
            out[s] = pair
        return self.n_samples
    
    def _handle_truncation(self, t: int, length: int):
        if self.truncation == "strict":
            raise TruncatedSequenceError(t, length, self.n_samples)
        logger.warning("Sequence %d is truncated: %d of %d samples read",
                       t, length, self.n_samples)
    
    def _skip_lines(self, count: int):
        for _ in range(count):
            newline = self._text.find("\n", self._pos)
            self._pos = len(self._text) if newline == -1 else newline + 1
    
    def _next_number(self) -> Optional[float]:
        self._pos = _WHITESPACE.match(self._text, self._pos).end()
        match = _FLOAT.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return float(match.group())
    
    def _next_pair(self) -> Optional[Tuple[float, float]]:
        x = self._next_number()
        if x is None:
            return None
        y = self._next_number()
        if y is None:
            return None
        return x, y

def read_corpus(path: str, n_samples: int = 1024, n_sequences: int = 100,
                truncation: str = "clamp") -> Corpus:
    """Convenience wrapper around CorpusReader.read."""
    return CorpusReader(n_samples, n_sequences, truncation=truncation).read(path)
