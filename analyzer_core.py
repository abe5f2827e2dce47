"""
Binary Data Analyzer - Core Module
==================================

Contains: configuration, the binary data source, the analyzer
family, the analysis engine, and console formatting.
"""

from __future__ import annotations
import numbers, os, platform, random, sys, time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Type

import numpy as np

from sort_search import selection_sort, binary_search

# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class AnalyzerConfig:
    seed: Optional[int] = None
    sample_size: int = 1000
    value_range: int = 1000
    missing_domain: int = 1000
    probe_count: int = 100
    probe_range: int = 1000
    data_file: str = "binary.dat"

    def __post_init__(self):
        if self.sample_size < 0:
            raise ValueError(f"sample_size must be >= 0, got {self.sample_size}")
        for field_name in ("value_range", "missing_domain", "probe_range"):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"{field_name} must be > 0, got {getattr(self, field_name)}")
        if self.probe_count < 0:
            raise ValueError(f"probe_count must be >= 0, got {self.probe_count}")

    def make_rng(self) -> random.Random:
        # seed=None draws from OS entropy, like seeding from the clock
        return random.Random(self.seed)


class Colors:
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    END = '\033[0m'

    @classmethod
    def disable(cls):
        for a in ['HEADER','CYAN','GREEN','YELLOW','RED','BOLD','END']:
            setattr(cls, a, '')

if not sys.stdout.isatty():
    Colors.disable()

# =============================================================================
# Data Source
# =============================================================================

INT32_MIN, INT32_MAX = -2**31, 2**31 - 1
WORD = np.dtype(np.int32).itemsize


class SourceUnavailableError(Exception):
    """The backing binary file is missing, unreadable or malformed."""


class BinaryDataFile:
    """
    Length-prefixed int32 array on disk.

    Layout: one 4-byte signed length, then `length` 4-byte signed
    integers, native byte order, no padding, no checksum.
    """

    def __init__(self, path: str):
        self.path = path

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def save(self, values: Sequence[int]) -> None:
        for v in values:
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                raise ValueError(f"value {v!r} is not an integer")
            if not INT32_MIN <= v <= INT32_MAX:
                raise ValueError(f"value {v} does not fit in a signed 32-bit integer")
        payload = np.asarray(values, dtype=np.int32)
        header = np.array([len(payload)], dtype=np.int32)
        with open(self.path, 'wb') as f:
            f.write(header.tobytes())
            f.write(payload.tobytes())

    def load(self) -> List[int]:
        try:
            with open(self.path, 'rb') as f:
                raw = f.read()
        except OSError as e:
            raise SourceUnavailableError(f"cannot read {self.path}: {e}") from e

        if len(raw) < WORD:
            raise SourceUnavailableError(f"{self.path}: truncated, missing length prefix")
        if len(raw) % WORD:
            raise SourceUnavailableError(
                f"{self.path}: {len(raw)} bytes is not a whole number of {WORD}-byte words")

        words = np.frombuffer(raw, dtype=np.int32)
        length = int(words[0])
        if length < 0:
            raise SourceUnavailableError(f"{self.path}: negative declared length {length}")
        if length != len(words) - 1:
            raise SourceUnavailableError(
                f"{self.path}: declared length {length} but payload holds {len(words) - 1} values")
        return words[1:].tolist()


def generate_sample(n: int, rng: random.Random, value_range: int = 1000) -> List[int]:
    return [rng.randrange(value_range) for _ in range(n)]


def create_binary_file(source: BinaryDataFile, n: int, rng: random.Random,
                       value_range: int = 1000) -> List[int]:
    """Fill a fresh sample with random values and persist it."""
    sample = generate_sample(n, rng, value_range)
    source.save(sample)
    return sample

# =============================================================================
# Analyzers
# =============================================================================

def frequency_table(values: Sequence[int]) -> Dict[int, int]:
    table: Dict[int, int] = {}
    for v in values:
        table[v] = table.get(v, 0) + 1
    return table


def fmt_number(x) -> str:
    """Render like a C stream: six significant digits, no trailing zeros."""
    return f"{float(x):g}"


class Analyzer(ABC):
    """
    Base for all analyses.

    Every instance owns a private copy of the sample it was built from;
    the caller's sequence is never touched. Subclasses that set
    requires_sorted get their copy sorted once, at construction.
    """
    name: str = ""
    description: str = ""
    requires_sorted: bool = False

    def __init__(self, values: Sequence[int]):
        self.values: List[int] = list(values)
        if self.requires_sorted:
            selection_sort(self.values)

    @property
    def size(self) -> int:
        return len(self.values)

    @classmethod
    def from_config(cls, values, config: AnalyzerConfig, rng: random.Random) -> "Analyzer":
        return cls(values)

    @abstractmethod
    def analyze(self) -> str: pass


class StatisticsAnalyzer(Analyzer):
    """
    Min, max, mean, median and mode of the sample.

    Mode ties: when several values share the highest count, the lowest
    of them is reported.
    """
    name = "statistics"
    description = "Min / max / mean / median / mode"
    requires_sorted = True

    EMPTY_REPORT = "No data to analyze."

    def analyze(self):
        a = self.values
        n = len(a)
        if n == 0:
            return self.EMPTY_REPORT

        lo, hi = a[0], a[-1]
        mean = sum(a) / n

        if n % 2 == 0:
            median = (a[n // 2 - 1] + a[n // 2]) / 2
        else:
            median = a[n // 2]

        table = frequency_table(a)
        max_count = max(table.values())
        mode = min(v for v, c in table.items() if c == max_count)

        return "\n".join([
            f"The minimum value is {lo}",
            f"The maximum value is {hi}",
            f"The mean value is {fmt_number(mean)}",
            f"The median value is {fmt_number(median)}",
            f"The mode value is {mode} which occurred {max_count} times",
        ])


class DuplicateAnalyzer(Analyzer):
    name = "duplicates"
    description = "Excess occurrences of repeated values"

    def analyze(self):
        duplicates = sum(c - 1 for c in frequency_table(self.values).values() if c > 1)
        return f"There were {duplicates} duplicated values"


class MissingAnalyzer(Analyzer):
    """Counts integers in [0, domain) that never occur in the sample."""
    name = "missing"
    description = "Values of the domain absent from the sample"

    def __init__(self, values, domain: int = 1000):
        if domain <= 0:
            raise ValueError(f"domain must be > 0, got {domain}")
        super().__init__(values)
        self.domain = domain

    @classmethod
    def from_config(cls, values, config, rng):
        return cls(values, domain=config.missing_domain)

    def analyze(self):
        present = set(self.values)
        missing = sum(1 for v in range(self.domain) if v not in present)
        return f"There were {missing} missing values"


class SearchAnalyzer(Analyzer):
    """
    Binary searches the sorted copy for random probe keys.

    Probes come from the injected rng, so a seeded rng gives a
    reproducible report. Each analyze() call draws fresh probes.
    """
    name = "search"
    description = "Random probes found by binary search"
    requires_sorted = True

    def __init__(self, values, rng: Optional[random.Random] = None,
                 probes: int = 100, probe_range: int = 1000):
        if probes < 0:
            raise ValueError(f"probes must be >= 0, got {probes}")
        if probe_range <= 0:
            raise ValueError(f"probe_range must be > 0, got {probe_range}")
        super().__init__(values)
        self.rng = rng if rng is not None else random.Random()
        self.probes = probes
        self.probe_range = probe_range

    @classmethod
    def from_config(cls, values, config, rng):
        return cls(values, rng=rng, probes=config.probe_count, probe_range=config.probe_range)

    def analyze(self):
        found = 0
        for _ in range(self.probes):
            if binary_search(self.values, self.rng.randrange(self.probe_range)):
                found += 1
        return f"There were {found} random values found"


ANALYZERS: Dict[str, Type[Analyzer]] = {a.name: a for a in [
    StatisticsAnalyzer, DuplicateAnalyzer, MissingAnalyzer, SearchAnalyzer
]}


def build_analyzer(name: str, values: Sequence[int], config: AnalyzerConfig,
                   rng: random.Random) -> Analyzer:
    try:
        cls = ANALYZERS[name]
    except KeyError:
        raise ValueError(f"unknown analyzer {name!r}; choose from {sorted(ANALYZERS)}") from None
    return cls.from_config(values, config, rng)

# =============================================================================
# Analysis Engine
# =============================================================================

@dataclass
class AnalysisResult:
    analyzer: str
    n: int
    report: str
    seconds: float
    error: Optional[str] = None


class AnalysisEngine:
    def __init__(self, config: AnalyzerConfig = AnalyzerConfig(), rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else config.make_rng()

    def run_one(self, name: str, sample: Sequence[int]) -> AnalysisResult:
        if name not in ANALYZERS:
            raise ValueError(f"unknown analyzer {name!r}; choose from {sorted(ANALYZERS)}")

        t0 = time.perf_counter()
        try:
            report = build_analyzer(name, sample, self.config, self.rng).analyze()
        except Exception as e:
            return AnalysisResult(name, len(sample), "", time.perf_counter() - t0, str(e))
        return AnalysisResult(name, len(sample), report, time.perf_counter() - t0)

    def run(self, sample: Sequence[int], names: Optional[Sequence[str]] = None) -> List[AnalysisResult]:
        if names is None:
            names = list(ANALYZERS)
        unknown = [n for n in names if n not in ANALYZERS]
        if unknown:
            raise ValueError(f"unknown analyzer(s) {unknown}; choose from {sorted(ANALYZERS)}")
        # Registry order is the order reports are printed in
        return [self.run_one(name, sample) for name in ANALYZERS if name in names]

# =============================================================================
# Formatting & Output
# =============================================================================

def fmt_time(t):
    """Format time with appropriate units."""
    if t < 1e-6:
        return f"{t*1e9:.1f}ns"
    if t < 1e-3:
        return f"{t*1e6:.1f}us"
    if t < 1:
        return f"{t*1e3:.2f}ms"
    return f"{t:.3f}s"


def get_system_info():
    return {
        "python_version": sys.version,
        "platform": platform.platform(),
        "numpy_version": np.__version__,
    }


def print_header(text):
    print(f"\n{Colors.BOLD}{Colors.HEADER}{'='*70}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.HEADER}{text.center(70)}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.HEADER}{'='*70}{Colors.END}\n")


def print_subheader(text):
    print(f"\n{Colors.BOLD}{Colors.CYAN}{text}{Colors.END}")
    print(f"{Colors.CYAN}{'-'*len(text)}{Colors.END}")


def print_sample_summary(sample):
    print(f"  Values loaded:         {len(sample):,}")
    if sample:
        print(f"  Range on disk:         [{min(sample)}, {max(sample)}]")


def print_results_table(results):
    """Print per-analysis timing and status."""
    hdr = f"{'Analyzer':<14} {'n':>8} {'Time':>10} {'Status':>8}"
    print(f"{Colors.BOLD}{hdr}{Colors.END}")
    print("-" * len(hdr))

    for r in results:
        status = f"{Colors.RED}FAIL{Colors.END}" if r.error else f"{Colors.GREEN}OK{Colors.END}"
        print(f"{r.analyzer:<14} {r.n:>8,} {fmt_time(r.seconds):>10} {status}")
