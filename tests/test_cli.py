import re
import numpy as np
import pytest
from main import main, run_convergence_experiment, build_parser
from experiments.config import RunConfig
from integrands.catalog import UnknownFunctionError
from corpus.base import TruncatedSequenceError

def test_quarterdisk_corners(corpus_file, capsys):
    path = corpus_file([[[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [1.0, 1.0]]])
    assert main(["quarterdisk", path, "4", "1"]) == 0
    assert capsys.readouterr().out == "4 0.250000\n"

def test_centroid_bilinear_has_zero_error(corpus_file, capsys):
    path = corpus_file(np.full((3, 16, 2), 0.5))
    assert main(["bilinear", path, "16", "3"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "4 0.000000", "8 0.000000", "12 0.000000", "16 0.000000",
    ]

def test_default_counts_give_256_lines(corpus_file, capsys):
    path = corpus_file(np.random.default_rng(11).random((100, 1024, 2)))
    assert main(["quartergaussian", path]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 256
    assert [int(line.split()[0]) for line in lines] == list(range(4, 1025, 4))
    assert all(re.fullmatch(r"\d+ \d+\.\d{6}", line) for line in lines)

def test_num_samples_without_num_sequences(corpus_file, capsys):
    path = corpus_file(np.random.default_rng(12).random((100, 8, 2)))
    assert main(["triangle", path, "8"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 2

def test_unknown_function(corpus_file, capsys):
    path = corpus_file(np.zeros((1, 4, 2)))
    assert main(["bogus", path, "4", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "bogus" in captured.err

def test_unknown_function_is_checked_before_file(tmp_path, capsys):
    assert main(["bogus", str(tmp_path / "missing.data")]) == 1
    captured = capsys.readouterr()
    assert "Unknown function: 'bogus'" in captured.err
    assert "missing.data" not in captured.err

def test_missing_file(tmp_path, capsys):
    path = str(tmp_path / "missing.data")
    assert main(["quarterdisk", path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert path in captured.err

@pytest.mark.parametrize("argv", [
    [],
    ["quarterdisk"],
    ["quarterdisk", "samples.data", "4", "1", "extra"],
    ["quarterdisk", "samples.data", "four"],
    ["quarterdisk", "samples.data", "0", "1"],
    ["quarterdisk", "samples.data", "4", "-1"],
])
def test_usage_errors(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Usage: funcsamp2D functionName samplesFilename [numSamples numSequences]" in captured.err

def test_truncated_sequence_is_reported_not_fatal(text_file, capsys):
    text = "// header\n// header\n// Sequence 0:\n0.5 0.5\n0.5 0.5\n"
    path = text_file(text)
    assert main(["bilinear", path, "8", "1"]) == 0
    assert capsys.readouterr().out == "4 0.000000\n8 0.000000\n"

def test_run_returns_checkpoint_data(corpus_file, capsys):
    path = corpus_file(np.random.default_rng(5).random((10, 64, 2)))
    results = run_convergence_experiment(RunConfig("stepx", path, n_samples=64, n_sequences=10))
    data = results["convergence_data"]
    np.testing.assert_array_equal(data.sample_counts, np.arange(4, 65, 4))
    assert np.all(data.average_errors <= data.max_errors)
    assert results["corpus"].n_sequences == 10
    assert results["integrand"].name == "stepx"
    assert len(capsys.readouterr().out.splitlines()) == 16

def test_run_raises_unknown_function(tmp_path):
    with pytest.raises(UnknownFunctionError):
        run_convergence_experiment(RunConfig("nope", str(tmp_path / "x.data"), n_samples=4, n_sequences=1))

def test_help_lists_functions():
    assert "sininvr" in build_parser().format_help()

@pytest.mark.parametrize("argv", [["-h"], ["-h", "x"], ["--help", "quarterdisk", "samples.data"]])
def test_help_flags_are_usage_errors(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Usage: funcsamp2D" in captured.err

def test_strict_truncation_raises_from_library(text_file):
    path = text_file("// h\n// h\n// Sequence 0:\n0.5 0.5\n")
    with pytest.raises(TruncatedSequenceError):
        run_convergence_experiment(RunConfig("bilinear", path, n_samples=4, n_sequences=1, truncation="strict"))

def test_cli_keeps_short_sequences(text_file, capsys):
    path = text_file("// h\n// h\n// Sequence 0:\n0.5 0.5\n")
    assert main(["bilinear", path, "4", "1"]) == 0
    assert capsys.readouterr().out == "4 0.000000\n"
