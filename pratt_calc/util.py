import numpy as np

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_U64_MASK = 2**64 - 1


def wrap_i64(value):
    # Two's complement reduction, same as unchecked int64_t arithmetic.
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return np.array(value & _U64_MASK, dtype=np.uint64).view(np.int64).item()


def trunc_div(lhs, rhs):
    quot = abs(lhs) // abs(rhs)
    return quot if (lhs < 0) == (rhs < 0) else -quot
