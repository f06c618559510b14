"""Sample a 2D function over the unit square with stored sample sequences.

Usage::

    funcsamp2D functionName samplesFilename [numSamples numSequences]

For example::

    funcsamp2D quarterdisk random_1024samples_100sequences.data 1024 100
    funcsamp2D quartergaussian halton_base23_owen_1024samples_100sequences.data > errors.data

The output is the average integration error over all sequences for sample
counts 4, 8, 12, ... numSamples, one ``<count> <error>`` line each.
"""
import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, TextIO
import numpy as np
from integrands.catalog import get_integrand, available_functions, UnknownFunctionError
from corpus.base import FileOpenError
from corpus.reader import CorpusReader
from experiments.config import RunConfig, DEFAULT_NUM_SAMPLES, DEFAULT_NUM_SEQUENCES
from experiments.convergence import ConvergenceEstimator, ConvergenceData, ErrorStats
from reporting.table import ErrorTableReporter

USAGE = "Usage: funcsamp2D functionName samplesFilename [numSamples numSequences]"

class UsageError(Exception):
    """Raised for malformed command line arguments."""

class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)

def run_convergence_experiment(config: RunConfig, stream: Optional[TextIO] = None) -> Dict[str, Any]:
    """
    Integrate one catalog function with every sequence of a corpus file and
    report the average error at each checkpoint.
    
    Args:
        config: Run parameters
        stream: Where the error table goes, sys.stdout if None
        
    Returns:
        Dictionary containing:
        - integrand: The resolved integrand
        - corpus: The loaded sample sequences
        - convergence_data: Errors at the reported checkpoints
    """
    # Resolve the function before touching the file
    integrand = get_integrand(config.function_name)
    
    reader = CorpusReader(config.n_samples, config.n_sequences,
                          truncation=config.truncation, max_points=config.max_points)
    corpus = reader.read(config.samples_filename)
    
    estimator = ConvergenceEstimator(integrand)
    reporter = ErrorTableReporter(stream=stream, stride=config.checkpoint_stride)
    checkpoints: List[ErrorStats] = []
    
    def record(stats_stream):
        for stats in stats_stream:
            if reporter.is_checkpoint(stats.sample_count):
                checkpoints.append(stats)
            yield stats
    
    reporter.report(record(estimator.iter_errors(corpus)))
    
    return {
        "integrand": integrand,
        "corpus": corpus,
        "convergence_data": ConvergenceData(
            sample_counts=np.array([c.sample_count for c in checkpoints], dtype=np.int64),
            average_errors=np.array([c.average_error for c in checkpoints]),
            max_errors=np.array([c.max_error for c in checkpoints]),
        ),
    }

def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="funcsamp2D",
        add_help=False,
        usage=USAGE[len("Usage: "):],
        description="Tabulate Monte Carlo integration error of a test function for increasing sample counts.",
        epilog="Known functions: " + " ".join(available_functions()),
    )
    parser.add_argument("function_name", metavar="functionName", help="Name of the test function.")
    parser.add_argument("samples_filename", metavar="samplesFilename", help="File with the sample sequences.")
    parser.add_argument("n_samples", metavar="numSamples", nargs="?", type=int, default=DEFAULT_NUM_SAMPLES,
                        help=f"Samples per sequence (default: {DEFAULT_NUM_SAMPLES}).")
    parser.add_argument("n_sequences", metavar="numSequences", nargs="?", type=int, default=DEFAULT_NUM_SEQUENCES,
                        help=f"Number of sequences (default: {DEFAULT_NUM_SEQUENCES}).")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")
    
    try:
        args = build_parser().parse_args(argv)
        config = RunConfig(
            function_name=args.function_name,
            samples_filename=args.samples_filename,
            n_samples=args.n_samples,
            n_sequences=args.n_sequences,
        )
    except (UsageError, ValueError) as e:
        print(USAGE, file=sys.stderr)
        print(f"error: {e}", file=sys.stderr)
        return 1
    
    try:
        run_convergence_experiment(config)
    except UnknownFunctionError as e:
        print(e, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        print("Known functions: " + " ".join(available_functions()), file=sys.stderr)
        return 1
    except FileOpenError as e:
        print(e, file=sys.stderr)
        return 1
    
    return 0

def cli():
    sys.exit(main())

if __name__ == "__main__":
    cli()
