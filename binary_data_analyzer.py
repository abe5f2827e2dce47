#!/usr/bin/env python3
"""
Binary Data Analyzer - Main Runner
==================================

Writes a block of random integers to a binary file, reads it back and
runs the analyzer family over it.

Usage:
    python binary_data_analyzer.py
    python binary_data_analyzer.py --seed 7 --size 5000
    python binary_data_analyzer.py --reuse --file binary.dat --only statistics missing
"""

import argparse
import sys

from analyzer_core import (
    AnalyzerConfig, AnalysisEngine, BinaryDataFile, SourceUnavailableError,
    ANALYZERS, create_binary_file, get_system_info,
    print_header, print_subheader, print_sample_summary, print_results_table,
    Colors,
)


def prepare_sample(config: AnalyzerConfig, source: BinaryDataFile, rng, reuse: bool = False,
                   quiet: bool = False):
    """Create the data file (unless reusing one) and load it back."""
    if not reuse:
        create_binary_file(source, config.sample_size, rng, config.value_range)
        if not quiet:
            print(f"  Wrote {config.sample_size:,} values to {source.path}")

    sample = source.load()
    if not quiet:
        print_sample_summary(sample)
    return sample


def run_analyses(engine: AnalysisEngine, sample, names=None):
    results = engine.run(sample, names)
    for r in results:
        if r.error:
            print(f"{Colors.RED}{r.analyzer} failed: {r.error}{Colors.END}")
        else:
            print(r.report)
    return results


def build_parser():
    parser = argparse.ArgumentParser(
        description="Binary Data Analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   Generate, reload and analyze
  %(prog)s --seed 42                         Reproducible run
  %(prog)s --reuse --file data.bin           Analyze an existing file
  %(prog)s --only duplicates missing         Run a subset of analyses
        """
    )
    parser.add_argument("--file", type=str, default="binary.dat", help="Data file (default: binary.dat)")
    parser.add_argument("--size", type=int, default=1000, help="Number of values to generate (default: 1000)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: unseeded)")
    parser.add_argument("--value-range", type=int, default=1000,
                        help="Generated values lie in [0, N) (default: 1000)")
    parser.add_argument("--domain", type=int, default=1000,
                        help="Missing-value scan covers [0, N) (default: 1000)")
    parser.add_argument("--probes", type=int, default=100, help="Random search probes (default: 100)")
    parser.add_argument("--probe-range", type=int, default=1000,
                        help="Probe keys lie in [0, N) (default: 1000)")
    parser.add_argument("--only", nargs="+", choices=list(ANALYZERS.keys()),
                        help="Analyses to run (default: all)")
    parser.add_argument("--reuse", action="store_true", help="Load the existing file instead of regenerating")
    parser.add_argument("--quiet", "-q", action="store_true", help="Reports only")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = AnalyzerConfig(
            seed=args.seed,
            sample_size=args.size,
            value_range=args.value_range,
            missing_domain=args.domain,
            probe_count=args.probes,
            probe_range=args.probe_range,
            data_file=args.file,
        )
    except ValueError as e:
        print(f"{Colors.RED}Invalid configuration: {e}{Colors.END}", file=sys.stderr)
        return 2

    rng = config.make_rng()
    source = BinaryDataFile(config.data_file)

    if not args.quiet:
        info = get_system_info()
        print(f"\n{Colors.BOLD}Binary Data Analyzer{Colors.END}")
        print(f"Python {info['python_version'].split()[0]} | NumPy {info['numpy_version']} | {info['platform']}\n")
        print_subheader("Data")

    try:
        sample = prepare_sample(config, source, rng, reuse=args.reuse, quiet=args.quiet)
    except SourceUnavailableError as e:
        print(f"{Colors.RED}Source unavailable: {e}{Colors.END}", file=sys.stderr)
        return 1

    if not args.quiet:
        print_header("Analysis")

    engine = AnalysisEngine(config, rng)
    results = run_analyses(engine, sample, args.only)

    if not args.quiet:
        print_subheader("Timing")
        print_results_table(results)
        print(f"\n{Colors.CYAN}Analysis complete.{Colors.END}\n")

    return 1 if any(r.error for r in results) else 0


if __name__ == "__main__":
    sys.exit(main())
