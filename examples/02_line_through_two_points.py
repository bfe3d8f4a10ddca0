import polyrecover as pr

# y = 2x - 1 through (1, 1) and (2, 3), values given in base 2 and base 16
record = {
    "keys": {"n": 2, "k": 2},
    "1": {"base": "2", "value": "1"},
    "2": {"base": "16", "value": "3"},
}
print(pr.recover_polynomial(record))

# the augmented system and its exact solution
points, k = pr.points_from_record(record)
mx = pr.build_system(points, k)
print(mx.to_multiline_string())
print(pr.GaussJordan.get_rational_instance().solve(mx, k))
print(mx.to_multiline_string())
