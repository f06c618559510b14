import numpy as np
import pytest
from corpus.writer import write_corpus

@pytest.fixture
def corpus_file(tmp_path):
    """Write an array of shape (n_sequences, n_samples, 2) as a corpus file and return its path."""
    def _write(points, name="samples.data"):
        path = tmp_path / name
        write_corpus(str(path), np.asarray(points, dtype=np.float64))
        return str(path)
    return _write

@pytest.fixture
def text_file(tmp_path):
    """Write raw corpus text and return its path."""
    def _write(text, name="raw.data"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write
