import logging
from os.path import dirname, abspath, join
import polyrecover as pr

logging.basicConfig(level=logging.INFO)

record = pr.load_record(join(dirname(abspath(__file__)), "testcase2.json"))
# only the first k=7 of the n=10 points are used
coeffs = pr.solve_record(record, verify=True)
print(pr.format_coefficients(coeffs))

# the same system with sympy's exact rref
print(pr.recover_polynomial(record, backend=pr.SYMPY))

if pr.FLINT_AVAILABLE:
    print(pr.recover_polynomial(record, backend=pr.FLINT))
