"""
number theory helpers for validating linear congruential mappings.

everything here is a pure function on python ints, so there's no
overflow to worry about even with the big multipliers.
"""


def gcd(a: int, b: int) -> int:
    """greatest common divisor (euclid). gcd(0, 0) == 0."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def is_coprime(a: int, b: int) -> bool:
    """True iff gcd(a, b) == 1. note is_coprime(0, n) only holds for n == 1."""
    return gcd(a, b) == 1


def prime_factors(n: int) -> list[int]:
    """
    distinct prime factors of |n|, ascending.

    trial division up to sqrt(n). prime_factors(1) == [] and
    prime_factors(0) == [] (nothing sensible to return).
    """
    n = abs(n)
    factors: list[int] = []
    if n < 2:
        return factors

    if n % 2 == 0:
        factors.append(2)
        while n % 2 == 0:
            n //= 2

    p = 3
    while p * p <= n:
        if n % p == 0:
            factors.append(p)
            while n % p == 0:
                n //= p
        p += 2

    # whatever is left is a prime bigger than sqrt of the input
    if n > 1:
        factors.append(n)

    return factors


def hull_dobell_validate(n: int, a: int, b: int) -> bool:
    """
    check the Hull-Dobell conditions for x -> (a*x + b) mod n.

    1. b and n are coprime
    2. a - 1 is divisible by every prime factor of n
    3. a - 1 is divisible by 4 if n is

    when all three hold the generator has full period n.
    """
    if not is_coprime(b, n):
        return False

    for p in prime_factors(n):
        if (a - 1) % p != 0:
            return False

    if n % 4 == 0 and (a - 1) % 4 != 0:
        return False

    return True


def multiplicative_order(a: int, n: int) -> int | None:
    """
    smallest k > 0 with a**k == 1 (mod n), or None if a, n aren't coprime.
    """
    if not is_coprime(a, n):
        return None

    one = 1 % n
    current = a % n
    order = 1
    while current != one:
        current = (current * a) % n
        order += 1
        if order > n:
            return None

    return order


def lcg_period(n: int, a: int, b: int) -> int | None:
    """
    period of the iterative generator, when Hull-Dobell can tell us.

    returns n for compliant parameters, None otherwise (unknown, not
    necessarily short).
    """
    if hull_dobell_validate(n, a, b):
        return n
    return None
