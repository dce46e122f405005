import random

import pytest

from sysdemos.rational import (
    LONG_MAX,
    LONG_MIN,
    Rational,
    checked_add,
    checked_multiply,
    checked_subtract,
    gcd,
    main,
)


def test_helpers_long_max_boundaries():
    with pytest.raises(OverflowError):
        checked_add(LONG_MAX, 1)
    assert checked_subtract(LONG_MAX, 1) == LONG_MAX - 1
    assert checked_multiply(LONG_MAX, 1) == LONG_MAX


def test_helpers_long_min_boundaries():
    with pytest.raises(OverflowError):
        checked_subtract(LONG_MIN, 1)
    assert checked_add(LONG_MIN, 1) == LONG_MIN + 1
    assert checked_multiply(LONG_MIN, 1) == LONG_MIN


def test_helpers_multiply_overflows():
    with pytest.raises(OverflowError):
        checked_multiply(LONG_MAX, 2)
    with pytest.raises(OverflowError):
        checked_multiply(LONG_MIN, 2)


def test_helpers_in_range():
    assert checked_add(25, 35) == 60
    assert checked_subtract(25, 35) == -10
    assert checked_multiply(25, 35) == 875


def test_initialization():
    r1 = Rational(1, 2)
    r2 = Rational(300, 400)
    assert (r1.num, r1.den) == (1, 2)
    assert (r2.num, r2.den) == (3, 4)

    r3 = r1.copy()
    assert (r3.num, r3.den) == (1, 2)

    r3 = Rational.from_long(4)
    assert (r3.num, r3.den) == (4, 1)


def test_simple_comparison():
    r1 = Rational(1, 2)
    r2 = Rational(300, 400)
    r3 = Rational(3, 4)
    assert r1.compare(r2).comparison < 0
    assert r2.compare(r3).comparison == 0
    assert r3.compare(r1).comparison > 0
    assert r1.compare(r2).valid is True


def test_simple_add():
    result = Rational(1, 2).add(Rational(-1, 4))
    assert result.compare(Rational(1, 4)).comparison == 0


def test_simple_subtract():
    result = Rational(2, 3).subtract(Rational(-1, 6))
    assert result.compare(Rational(5, 6)).comparison == 0


def test_simple_multiply():
    result = Rational(2, 3).multiply(Rational(30, 20))
    assert result.compare(Rational(1, 1)).comparison == 0


def test_simple_divide():
    result = Rational(-2, 3).divide(Rational(2000, -3000))
    assert result.compare(Rational(1, 1)).comparison == 0


def test_simple_reciprocal():
    r1 = Rational.from_long(4)
    r2 = r1.copy()
    r2.reciprocal()
    result = r1.multiply(r2)
    assert result.compare(Rational.from_long(1)).comparison == 0


def test_simple_negate():
    r1 = Rational(-1, 4)
    r2 = r1.copy()
    r1.negate()
    result = r1.add(r2)
    assert result.compare(Rational.from_long(0)).comparison == 0


def test_random_add():
    rng = random.Random(1234)
    for _ in range(10):
        r1 = Rational(1000 - rng.randrange(1000), 1 + rng.randrange(1000))
        r2 = Rational(1000 - rng.randrange(1000), 1 + rng.randrange(1000))
        rand_num = r1.num * r2.den + r1.den * r2.num
        rand_den = r1.den * r2.den
        expected = Rational(rand_num, rand_den)
        assert r1.add(r2).compare(expected).comparison == 0


def test_negative_denominator_is_normalised():
    r = Rational(-100, -200)
    assert (r.num, r.den) == (1, 2)
    r = Rational(100, -200)
    assert (r.num, r.den) == (-1, 2)


def test_zero_denominator_is_invalid():
    r = Rational(0, 25)
    assert (r.num, r.den, r.valid) == (0, 1, True)
    r.reciprocal()
    assert (r.num, r.den, r.valid) == (1, 0, False)
    r.reciprocal()
    assert (r.num, r.den, r.valid) == (0, 1, False)


def test_overflow_marks_result_invalid():
    big = Rational.from_long(LONG_MAX)
    assert big.multiply(Rational.from_long(2)).valid is False
    assert big.add(Rational.from_long(1)).valid is False


def test_invalid_propagates():
    bad = Rational(1, 0)
    assert Rational(1, 2).add(bad).valid is False


def test_gcd():
    assert gcd(-12, 18) == 6
    assert gcd(7, 0) == 7
    assert gcd(0, 0) == 0


def test_str_format():
    assert str(Rational(25, 75)) == "1/3 (valid=1)"
    assert str(Rational(1, 0)) == "1/0 (valid=0)"


def test_demo_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "r1 = 1/3 (valid=1) r2 = -1/2 (valid=1) r3 = -1/2 (valid=1)"
    assert lines[1] == "r1 + r2 = -1/6 (valid=1)"
    assert lines[2] == "r1 - r2 = 5/6 (valid=1)"
    assert lines[3] == "r1 * r2 = -1/6 (valid=1)"
    assert lines[5] == "r1^0 = 1/1 (valid=1)"
    assert lines[-1] == "r3 (reciprocal of invalid) = 0/1 (valid=0)"
    assert lines[5 + 39].endswith("(valid=1)")
    assert lines[5 + 40].endswith("[underflow]")