import pytest
from fixedrational import RationalNumber
from fixedrational.names import INT64_MAX, INT64_MIN

# Numerators and denominators hugging the edges of the signed 64-bit range
boundary_ints = [1, 2, 3, 7, 2**31 - 1, 2**31, 2**32 - 1, 2**32, 2**32 + 1, 2**62, INT64_MAX - 2, INT64_MAX - 1, INT64_MAX]

# Unsigned 64-bit operands around the limb and word boundaries
uint64_boundaries = [
    0, 1, 2, 3, 2**31, 2**32 - 1, 2**32, 2**32 + 1, 2**33 - 1, 2**48 + 7, 2**63 - 1, 2**63, 2**63 + 1, 2**64 - 2, 2**64 - 1
]


@pytest.fixture(scope="session")
def sample_rationals():
    """Provide session-level list of rationals spread over the whole range."""
    pairs = [(0, 1), (1, 1), (-1, 1), (1, 2), (-1, 2), (2, 3), (-2, 3), (3, 4), (5, 6), (7, 8), (17, 12),
             (INT64_MAX, 1), (-INT64_MAX, 1), (1, INT64_MAX), (-1, INT64_MAX), (INT64_MAX - 1, INT64_MAX),
             (INT64_MAX - 2, INT64_MAX), (INT64_MIN + 2, INT64_MAX), (INT64_MIN + 1, INT64_MAX - 1),
             (2**32 + 1, 2**32), (2**32, 2**32 + 1), (-(2**62), 2**61 + 1), (INT64_MAX, 2**62), (INT64_MAX - 1, 2**32 - 1)]
    return [RationalNumber(n, d) for n, d in pairs]


@pytest.fixture(params=boundary_ints, scope="session")
def boundary_int(request: pytest.FixtureRequest) -> int:
    """Provide session-level fixture for parametrized 64-bit boundary integers."""
    return request.param


@pytest.fixture(scope="session")
def uint64_operands() -> list:
    return list(uint64_boundaries)
