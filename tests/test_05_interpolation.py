"""Tests for recovering polynomials from numeral-encoded records."""
import json
import random

import pytest
import sympy
import polyrecover as pr
from polyrecover import (BigFraction, Point, load_record, points_from_record, solve_record, recover_polynomial,
                         format_coefficients, evaluate_polynomial, verify_coefficients, format_numeral)
from polyrecover.errors import MalformedInput, InvalidDigit, InvalidBase, SingularMatrix, VerificationError
from polyrecover.names import *


def make_record(ys, bases=None, n=None):
    """Record with the given y-values rendered in the given bases."""
    bases = bases or [10] * len(ys)
    record = {KEYS: {N: n if n is not None else len(ys), K: len(ys)}}
    for i, (y, base) in enumerate(zip(ys, bases), start=1):
        record[str(i)] = {BASE: str(base), VALUE: format_numeral(y, base)}
    return record


def test_points_from_record(record_square):
    points, k = points_from_record(record_square)
    assert k == 3
    assert points == [Point(1, 4), Point(2, 7), Point(3, 12)]


def test_square_plus_three(record_square, curr_backend):
    """Labels beyond k are never read, even if they are not valid numerals."""
    assert recover_polynomial(record_square, backend=curr_backend) == "1, 0, 3"


def test_rational_output(curr_backend):
    record = make_record([0, 0, 1], bases=[2, 7, 36])
    assert recover_polynomial(record, backend=curr_backend) == "1/2, -3/2, 1"


def test_n_is_informational():
    record = make_record([1, 3], n=99)
    assert recover_polynomial(record) == "2, -1"
    del record[KEYS][N]
    assert recover_polynomial(record) == "2, -1"


def test_k_as_string():
    record = make_record([1, 3])
    record[KEYS][K] = "2"
    assert recover_polynomial(record) == "2, -1"


def test_integer_labels():
    record = {KEYS: {K: 2}, 1: {BASE: 10, VALUE: "1"}, 2: {BASE: 10, VALUE: "3"}}
    assert recover_polynomial(record) == "2, -1"


@pytest.mark.parametrize("mutate", [
    lambda r: r.pop(KEYS),
    lambda r: r[KEYS].pop(K),
    lambda r: r[KEYS].update({K: 0}),
    lambda r: r[KEYS].update({K: "two"}),
    lambda r: r[KEYS].update({K: True}),
    lambda r: r.pop("2"),
    lambda r: r["1"].pop(BASE),
    lambda r: r["2"].pop(VALUE),
    lambda r: r["2"].update({VALUE: 3}),
    lambda r: r.update({"1": "1"}),
])
def test_malformed_input(mutate):
    record = make_record([1, 3])
    mutate(record)
    with pytest.raises(MalformedInput):
        solve_record(record)


def test_malformed_record_type():
    with pytest.raises(MalformedInput):
        points_from_record([1, 2, 3])
    with pytest.raises(MalformedInput):
        load_record(42)


def test_invalid_digit_in_record():
    record = make_record([1, 3])
    record["2"][VALUE] = "g"
    record["2"][BASE] = "16"
    with pytest.raises(InvalidDigit):
        solve_record(record)


def test_invalid_base_in_record():
    record = make_record([1, 3])
    record["1"][BASE] = "37"
    with pytest.raises(InvalidBase):
        solve_record(record)


def test_unknown_options():
    record = make_record([1, 3])
    with pytest.raises(ValueError):
        solve_record(record, solver=GAUSS)
    with pytest.raises(ValueError):
        solve_record(record, backend="numpy")


def test_load_record_from_file(tmp_path):
    record = make_record([5, 5, 5])
    path = tmp_path / "record.json"
    path.write_text(json.dumps(record))
    assert load_record(str(path)) == record
    assert recover_polynomial(path) == "0, 0, 5"


def test_load_record_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{\"keys\": ")
    with pytest.raises(MalformedInput):
        load_record(path)


def test_load_record_not_utf8(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"keys": {"k": 1}, "1": {"base": "10", "value": "\xff\xfe"}}')
    with pytest.raises(MalformedInput):
        load_record(path)


def test_format_coefficients():
    assert format_coefficients([BigFraction(2), BigFraction(-1, 3), BigFraction(0)]) == "2, -1/3, 0"
    assert format_coefficients([]) == ""


def test_evaluate_and_verify():
    coefficients = [BigFraction(1, 2), BigFraction(-3, 2), BigFraction(1)]
    assert evaluate_polynomial(coefficients, 3) == 1
    assert evaluate_polynomial(coefficients, BigFraction(1, 2)) == BigFraction(3, 8)
    assert verify_coefficients(coefficients, [Point(1, 0), Point(2, 0), Point(3, 1)])
    assert not verify_coefficients(coefficients, [Point(1, 0), Point(2, 1), Point(3, 1)])
    assert not verify_coefficients(coefficients, [Point(1, 0)])


def test_verify_option(monkeypatch, record_square):
    assert solve_record(record_square, verify=True) == [BigFraction(1), BigFraction(0), BigFraction(3)]
    monkeypatch.setattr(pr.interpolation, "verify_coefficients", lambda coefficients, points: False)
    with pytest.raises(VerificationError):
        solve_record(record_square, verify=True)


TESTCASE2_COEFFICIENTS = ("-274832148322104827/120, 3901652238294748211/60, -2695332236994289795/4, "
                          "21267399969085604485/6, -1176819016069423221523/120, 263287321821700164753/20, "
                          "-6290016743746469796")


def test_testcase2_known_output(testcase2, curr_backend):
    assert recover_polynomial(testcase2, backend=curr_backend) == TESTCASE2_COEFFICIENTS


def test_testcase2_backends_agree(testcase2, curr_backend):
    reference = solve_record(testcase2)
    coefficients = solve_record(testcase2, backend=curr_backend, verify=True)
    assert coefficients == reference
    assert len(coefficients) == 7


def test_testcase2_from_path(testcase2_path, testcase2):
    assert recover_polynomial(testcase2_path) == recover_polynomial(testcase2)


def test_testcase2_deterministic(testcase2):
    assert recover_polynomial(testcase2) == recover_polynomial(testcase2)


def test_testcase2_ignores_unused_points(testcase2):
    expected = recover_polynomial(testcase2)
    for label in ("8", "9", "10"):
        testcase2[label][VALUE] = "!"
    assert recover_polynomial(testcase2) == expected


@pytest.mark.timeout(60)
def test_round_trip_random_polynomial(curr_backend):
    rng = random.Random(20240607)
    k = 12
    coefficients = [rng.randint(1, 10**12) for _ in range(k)]
    ys = [sum(c * i**(k - 1 - p) for p, c in enumerate(coefficients)) for i in range(1, k + 1)]
    bases = [rng.randint(2, 36) for _ in range(k)]
    record = make_record(ys, bases=bases, n=k + 5)
    assert recover_polynomial(record, backend=curr_backend) == ", ".join(str(c) for c in coefficients)


def test_agrees_with_sympy_interpolation():
    ys = [3, 1, 4, 1, 5, 9, 2, 6]
    X = sympy.Symbol("x")
    expected = sympy.Poly(sympy.interpolate(list(zip(range(1, len(ys) + 1), ys)), X), X).all_coeffs()
    coefficients = solve_record(make_record(ys, bases=[3, 5, 7, 11, 13, 17, 19, 23]))
    assert [str(c) for c in coefficients] == [str(c) for c in expected]
