import io
import re
import numpy as np
import pytest
from corpus.base import Corpus
from experiments.convergence import ConvergenceEstimator, ErrorStats
from integrands.catalog import get_integrand
from reporting.table import ErrorTableReporter

def make_stats(sample_count, average_error, max_error=1.0):
    return ErrorStats(sample_count=sample_count, average_error=average_error,
                      max_error=max_error, errors=np.array([average_error]))

def test_only_multiples_of_stride_are_written():
    out = io.StringIO()
    n_lines = ErrorTableReporter(stream=out).report(make_stats(n, 0.1) for n in range(1, 13))
    assert n_lines == 3
    assert out.getvalue() == "4 0.100000\n8 0.100000\n12 0.100000\n"

def test_six_fractional_digits():
    reporter = ErrorTableReporter()
    assert reporter.format_line(make_stats(4, 0.17)) == "4 0.170000"
    assert reporter.format_line(make_stats(1024, 0.0120214)) == "1024 0.012021"
    assert reporter.format_line(make_stats(8, 0.0)) == "8 0.000000"

def test_include_max_column():
    reporter = ErrorTableReporter(include_max=True)
    assert reporter.format_line(make_stats(4, 0.25, 0.5)) == "4 0.250000 0.500000"

def test_flushes_every_line():
    class CountingStream(io.StringIO):
        flushes = 0
        
        def flush(self):
            self.flushes += 1
            super().flush()
    
    out = CountingStream()
    ErrorTableReporter(stream=out).report(make_stats(n, 0.5) for n in range(1, 17))
    assert out.flushes == 4

def test_defaults_to_stdout(capsys):
    ErrorTableReporter().emit(make_stats(4, 0.25))
    assert capsys.readouterr().out == "4 0.250000\n"

def test_invalid_stride():
    with pytest.raises(ValueError):
        ErrorTableReporter(stride=0)

def test_full_table_for_1024_samples():
    corpus = Corpus.from_points(np.random.default_rng(3).random((4, 1024, 2)))
    out = io.StringIO()
    ErrorTableReporter(stream=out).report(ConvergenceEstimator(get_integrand("fulldisk")).iter_errors(corpus))
    lines = out.getvalue().splitlines()
    assert len(lines) == 256
    assert [int(line.split()[0]) for line in lines] == list(range(4, 1025, 4))
    assert all(re.fullmatch(r"\d+ \d+\.\d{6}", line) for line in lines)
