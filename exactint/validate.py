"""
Cross-check harness for exactint.

Runs a sequence of checks against independent references:
1. Parsing and formatting round trips (Python int() for bases 2..36)
2. Shifts and bitwise ops (Python <<, >>, &, |, ^, ~)
3. Number theory (math.gcd, pow, sympy.mod_inverse)
4. Primality (sympy.isprime)
5. Random sampler bounds and chi-square uniformity (numpy)

Usage:
    exactint-validate
    exactint-validate --trials 500 --seed 7 --log-dir runs/validate -v
"""

import argparse
import logging
import math
import sys
import uuid
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import numpy as np
import sympy

from .config import DEFAULT_CONFIG
from .errors import NotCoprimeError
from .runlog import ValidationLogger, create_manifest
from .sampling import make_rng
from .value import BigInteger

logger = logging.getLogger(__name__)

# 0.999 quantile of chi-square with 9 degrees of freedom
CHI_SQUARE_CRITICAL_DF9 = 27.877


def chi_square_statistic(samples: Sequence[int], low: int, high: int) -> float:
    """Pearson statistic of samples against a uniform [low, high] histogram."""
    counts = np.bincount(np.asarray(samples, dtype=np.int64) - low,
                         minlength=high - low + 1)
    expected = len(samples) / (high - low + 1)
    return float(((counts - expected) ** 2 / expected).sum())


def random_big_ints(rng: np.random.Generator, count: int, max_bytes: int = 40) -> List[int]:
    """Signed ints of mixed sizes, from one byte up to max_bytes."""
    out = []
    for _ in range(count):
        size = int(rng.integers(1, max_bytes + 1))
        n = int.from_bytes(rng.bytes(size), "big")
        out.append(-n if rng.random() < 0.5 else n)
    return out


class Validator:
    """Collects check results, printing each and forwarding to a run log."""

    def __init__(self, run_log: Optional[ValidationLogger] = None):
        self.run_log = run_log
        self.results: List[bool] = []
        self._section = ""

    def section(self, name: str):
        self._section = name
        print(f"\n{'='*60}")
        print(f"  {name}")
        print(f"{'='*60}")

    def check(self, name: str, passed: bool, detail: str = "") -> bool:
        status = "PASS" if passed else "FAIL"
        print(f"  [{status}] {name}" + (f" -- {detail}" if detail else ""))
        if self.run_log is not None:
            self.run_log.log_check(self._section, name, passed, detail)
        self.results.append(passed)
        return passed

    def check_all(self, name: str, cases: Sequence, predicate: Callable) -> bool:
        """One check covering every case; the first failing case is reported."""
        for case in cases:
            if not predicate(case):
                return self.check(name, False, f"first failure: {case!r}")
        return self.check(name, True, f"{len(cases)} cases")

    @property
    def passed(self) -> bool:
        return all(self.results)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def check_radix(v: Validator, values: List[int]):
    v.section("1. Parsing and formatting")
    v.check("from_text('ff', 16) == 255", BigInteger.from_text("ff", 16) == 255)
    v.check("to_string(16) of 255 == 'ff'", BigInteger(255).to_string(16) == "ff")
    v.check_all(
        "to_string matches int() in bases 2..36",
        [(n, b) for n in values for b in (2, 3, 7, 10, 16, 36)],
        lambda c: int(BigInteger(c[0]).to_string(c[1]), c[1]) == c[0],
    )
    v.check_all(
        "round trip in bases 2..36",
        [(n, b) for n in values[:20] for b in range(2, 37)],
        lambda c: BigInteger.from_text(BigInteger(c[0]).to_string(c[1]), c[1]) == c[0],
    )
    v.check_all(
        "round trip in negative and large bases",
        [(n, b) for n in values[:20] for b in (-2, -10, -36, 100, 10 ** 9)],
        lambda c: BigInteger.from_text(BigInteger(c[0]).to_string(c[1]), c[1]) == c[0],
    )


def check_bits(v: Validator, values: List[int], rng: np.random.Generator):
    v.section("2. Shifts and bitwise")
    pairs = list(zip(values, reversed(values)))
    amounts = [int(a) for a in rng.integers(0, 200, size=len(values))]
    v.check_all("shift_left == <<", list(zip(values, amounts)),
                lambda c: BigInteger(c[0]).shift_left(c[1]) == c[0] << c[1])
    v.check_all("shift_right == >>", list(zip(values, amounts)),
                lambda c: BigInteger(c[0]).shift_right(c[1]) == c[0] >> c[1])
    v.check_all("bitwise_and == &", pairs,
                lambda c: BigInteger(c[0]).bitwise_and(c[1]) == c[0] & c[1])
    v.check_all("bitwise_or == |", pairs,
                lambda c: BigInteger(c[0]).bitwise_or(c[1]) == c[0] | c[1])
    v.check_all("bitwise_xor == ^", pairs,
                lambda c: BigInteger(c[0]).bitwise_xor(c[1]) == c[0] ^ c[1])
    v.check_all("bitwise_not == ~", values,
                lambda n: BigInteger(n).bitwise_not() == ~n)


def _mod_inv_agrees(a: int, n: int) -> bool:
    try:
        expected = int(sympy.mod_inverse(a, n))
    except ValueError:
        expected = None
    try:
        got = BigInteger(a).mod_inv(n)
    except NotCoprimeError:
        return expected is None
    return expected is not None and (got.value - expected) % n == 0


def check_number_theory(v: Validator, values: List[int], rng: np.random.Generator):
    v.section("3. Number theory")
    pairs = list(zip(values, reversed(values)))
    v.check_all("gcd == math.gcd", pairs,
                lambda c: BigInteger.gcd(c[0], c[1]) == math.gcd(c[0], c[1]))
    v.check_all("lcm == sympy.lcm", pairs,
                lambda c: BigInteger.lcm(c[0], c[1]) == abs(int(sympy.lcm(c[0], c[1]))))
    moduli = [int(m) for m in rng.integers(2, 10 ** 6, size=len(values))]
    v.check_all("mod_inv agrees with sympy.mod_inverse",
                [(abs(a) % m, m) for a, m in zip(values, moduli)],
                lambda c: _mod_inv_agrees(c[0], c[1]))
    exps = [int(e) for e in rng.integers(0, 10 ** 6, size=len(values))]
    v.check_all("mod_pow == pow for non-negative bases",
                [(abs(a), e, m) for a, e, m in zip(values, exps, moduli)],
                lambda c: BigInteger(c[0]).mod_pow(c[1], c[2]) == pow(c[0], c[1], c[2]))
    v.check_all("pow == ** for small exponents",
                [(a, e) for a, e in zip(values[:30], range(30))],
                lambda c: BigInteger(c[0]).pow(c[1]) == c[0] ** c[1])
    v.check_all("bit_length == int.bit_length", values,
                lambda n: BigInteger(n).bit_length() == abs(n).bit_length())


def check_primality(v: Validator, limit: int):
    v.section("4. Primality")
    v.check_all(f"is_prime agrees with sympy below {limit}", list(range(limit)),
                lambda n: BigInteger(n).is_prime() == sympy.isprime(n))
    big = [2 ** 61 - 1, 2 ** 64 - 59, 2 ** 89 - 1, 2 ** 127 - 1,
           (2 ** 61 - 1) * (2 ** 31 - 1), 2 ** 64 + 1, 2 ** 128 + 1]
    v.check_all("is_prime agrees with sympy near and above 2^64", big,
                lambda n: BigInteger(n).is_prime() == sympy.isprime(n))


def check_sampling(v: Validator, seed: int, trials: int):
    v.section("5. Random sampler")
    rng = make_rng(seed)
    low, high = -3, 6
    samples = [BigInteger.rand_between(low, high, rng).value for _ in range(trials)]
    v.check("samples stay in [-3, 6]", all(low <= s <= high for s in samples))
    stat = chi_square_statistic(samples, low, high)
    v.check("chi-square uniformity (df=9, p=0.001)",
            stat < CHI_SQUARE_CRITICAL_DF9, f"statistic {stat:.2f}")
    wide_low, wide_high = -(10 ** 30), 10 ** 30 + 17
    wide = [BigInteger.rand_between(wide_high, wide_low, rng).value for _ in range(200)]
    v.check("wide range stays in bounds",
            all(wide_low <= s <= wide_high for s in wide))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exactint-validate",
        description="Cross-check exactint against independent references.",
    )
    parser.add_argument("--seed", type=int, default=42, help="RNG seed")
    parser.add_argument("--trials", type=int, default=2000,
                        help="Sampler draws for the uniformity check")
    parser.add_argument("--values", type=int, default=100,
                        help="Random operands per arithmetic section")
    parser.add_argument("--prime-limit", type=int, default=10000,
                        help="Exhaustive primality cross-check bound")
    parser.add_argument("--log-dir", type=Path, default=None,
                        help="Write manifest.json and JSONL check logs here")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(asctime)s %(name)s %(levelname)s %(message)s")

    run_log = None
    if args.log_dir is not None:
        run_config = dict(vars(args), log_dir=str(args.log_dir),
                          library=DEFAULT_CONFIG.to_dict())
        manifest = create_manifest(uuid.uuid4().hex[:12], run_config)
        run_log = ValidationLogger(args.log_dir, manifest)

    print("exactint validation suite")
    print(f"Python: {sys.version.split()[0]}  numpy: {np.__version__}  "
          f"sympy: {sympy.__version__}")

    rng = np.random.default_rng(args.seed)
    values = random_big_ints(rng, args.values)
    v = Validator(run_log)
    try:
        check_radix(v, values)
        check_bits(v, values, rng)
        check_number_theory(v, values, rng)
        check_primality(v, args.prime_limit)
        check_sampling(v, args.seed, args.trials)
    finally:
        if run_log is not None:
            run_log.close()
            logger.debug("run log summary: %s", run_log.summary)

    n_pass = sum(v.results)
    print(f"\n{n_pass}/{len(v.results)} checks passed")
    return 0 if v.passed else 1


if __name__ == "__main__":
    sys.exit(main())
