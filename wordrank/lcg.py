"""
linear congruential parameter search for the daily rotation.

the scheduler maps day index i to pool slot (a*i + b) mod n. as long as
a is coprime with n that mapping is a permutation of the pool over any
n consecutive days, so no word repeats until the pool is exhausted.
the optimizer below picks (a, b) so the sequence doesn't look like
"next word in the list" to anyone who has seen a few days.
"""

import logging
from dataclasses import dataclass, field

from .errors import NoValidParametersError
from .numtheory import (
    hull_dobell_validate,
    is_coprime,
    multiplicative_order,
    prime_factors,
)

logger = logging.getLogger(__name__)


# multipliers with a long track record in RNG implementations
WELL_KNOWN_MULTIPLIERS = (
    16807,      # 7^5, park-miller "minimal standard"
    48271,      # park-miller revised
    69621,
    630360016,
)

# score weights (sum to 100)
HULL_DOBELL_WEIGHT = 40
SPECTRAL_WEIGHT = 30
MULTIPLIER_WEIGHT = 30


@dataclass(frozen=True)
class LCGParams:
    """modulus n, multiplier a, increment b."""

    n: int
    a: int
    b: int

    def slot(self, index: int) -> int:
        """direct mapping (a*index + b) mod n, always in [0, n)."""
        return ((self.a * index + self.b) % self.n + self.n) % self.n


@dataclass
class LCGQuality:
    """quality metrics for a parameter triple."""

    hull_dobell_compliant: bool

    # n when the direct mapping is a full permutation, None if unknown
    period: int | None

    # placeholder until a real spectral test exists
    spectral_quality: float

    multiplier_quality: float


@dataclass
class CycleAnalysis:
    """results from analyze_lcg_cycle."""

    # steps until the first value comes back, -1 if it never did
    cycle_length: int
    has_duplicates: bool
    duplicate_positions: list[int] = field(default_factory=list)


def score_multiplier(a: int, n: int, hull_dobell_compliant: bool) -> float:
    """
    score a multiplier in [0, 100].

    a == 1 (mod n) scores 0: it walks the pool one slot per day.
    """
    if a % n == 1:
        return 0.0

    if not hull_dobell_compliant:
        # still a full permutation in the direct form
        return 20.0 if is_coprime(a, n) else 0.0

    if a in WELL_KNOWN_MULTIPLIERS:
        return 100.0

    order = multiplicative_order(a, n)
    if order is None:
        return 0.0

    # long order and few prime factors are better
    order_ratio = order / n
    factor_penalty = len(prime_factors(a)) * 5
    return max(0.0, min(100.0, order_ratio * 80 - factor_penalty + 20))


def evaluate_lcg_quality(params: LCGParams) -> LCGQuality:
    """evaluate how good a parameter triple is."""
    n, a, b = params.n, params.a, params.b

    compliant = hull_dobell_validate(n, a, b)
    direct_full_cycle = is_coprime(a, n)

    period = n if (compliant or direct_full_cycle) else None

    if compliant:
        spectral = 90.0
    elif direct_full_cycle:
        spectral = 70.0
    else:
        spectral = 30.0

    return LCGQuality(
        hull_dobell_compliant=compliant,
        period=period,
        spectral_quality=spectral,
        multiplier_quality=score_multiplier(a, n, compliant),
    )


def calculate_overall_score(quality: LCGQuality) -> float:
    """weighted score in [0, 100]."""
    hull_dobell_score = 100.0 if quality.hull_dobell_compliant else 0.0
    return (
        hull_dobell_score * HULL_DOBELL_WEIGHT / 100
        + quality.spectral_quality * SPECTRAL_WEIGHT / 100
        + quality.multiplier_quality * MULTIPLIER_WEIGHT / 100
    )


def _pick_increment(n: int, a: int, limit: int) -> int | None:
    """
    smallest Hull-Dobell compliant b in [0, min(limit, n)), else 0 when
    a alone is coprime with n, else None.
    """
    # hull-dobell implies a == 1 mod every prime of n, hence coprime
    if not is_coprime(a, n):
        return None
    for b in range(min(limit, n)):
        if hull_dobell_validate(n, a, b):
            return b
    return 0


def find_optimal_lcg_params(
    n: int,
    increment_limit: int = 100,
    search_limit: int = 10_000,
    max_candidates: int = 10,
) -> LCGParams:
    """
    find the best (a, b) for pool size n.

    args:
        n: pool size (modulus), must be >= 2
        increment_limit: b is searched in [0, min(increment_limit, n))
        search_limit: a is scanned in [2, min(search_limit, 10 * n))
        max_candidates: stop the scan once this many candidates exist

    returns:
        the highest scoring LCGParams (first found wins ties)

    raises:
        NoValidParametersError: n < 2 or no coprime multiplier exists
    """
    if n < 2:
        raise NoValidParametersError(f"invalid modulus n={n}, must be >= 2")

    candidates: list[LCGParams] = []
    degenerate: list[LCGParams] = []

    def consider(a: int) -> None:
        b = _pick_increment(n, a, increment_limit)
        if b is None:
            return
        if a % n == 1:
            degenerate.append(LCGParams(n, a, b))
        else:
            candidates.append(LCGParams(n, a, b))

    # --- well-known multipliers ---
    for a in WELL_KNOWN_MULTIPLIERS:
        consider(a)

    # --- exhaustive scan ---
    max_a = min(search_limit, n * 10)
    for a in range(2, max_a):
        if len(candidates) >= max_candidates:
            break
        consider(a)

    if not candidates:
        # n == 2 only admits shifts: every odd a is 1 (mod 2)
        if not degenerate:
            raise NoValidParametersError(f"no valid LCG parameters found for n={n}")
        logger.warning(
            "only degenerate multipliers exist for n=%d, using a=%d",
            n, degenerate[0].a,
        )
        return degenerate[0]

    best = max(candidates, key=lambda p: calculate_overall_score(evaluate_lcg_quality(p)))
    logger.debug("picked %s out of %d candidates", best, len(candidates))
    return best


def generate_direct_sequence(params: LCGParams, length: int) -> list[int]:
    """slots for indices 0..length-1 using the direct mapping."""
    return [params.slot(i) for i in range(length)]


def generate_lcg_sequence(params: LCGParams, length: int, seed: int = 0) -> list[int]:
    """iterative form x -> (a*x + b) mod n, starting after seed."""
    sequence: list[int] = []
    current = seed
    for _ in range(length):
        current = (params.a * current + params.b) % params.n
        sequence.append(current)
    return sequence


def analyze_lcg_cycle(params: LCGParams, max_length: int = 10_000) -> CycleAnalysis:
    """
    look for repeats in the iterative sequence.

    cycle_length is the number of steps until the first value shows up
    again, or -1 if it never does within max_length.
    """
    sequence = generate_lcg_sequence(params, max_length)

    seen: set[int] = set()
    duplicates: list[int] = []
    for i, value in enumerate(sequence):
        if value in seen:
            duplicates.append(i)
        seen.add(value)

    cycle_length = -1
    if sequence:
        first = sequence[0]
        for i in range(1, len(sequence)):
            if sequence[i] == first:
                cycle_length = i
                break

    return CycleAnalysis(
        cycle_length=cycle_length,
        has_duplicates=bool(duplicates),
        duplicate_positions=duplicates,
    )
