import numpy as np
import pytest
from lss.core.exceptions import DimensionError
from lss.core.index import CoordEntry, IndexPair
from lss.core.pattern import build_pattern


def _entries(*triplets):
    return [CoordEntry(IndexPair(i, j), v) for i, j, v in triplets]


ENTRIES = _entries((2, 0, -1.0), (0, 2, 5.0), (1, 1, 3.0), (0, 0, 2.0), (0, 2, 1.0))


def test_row_pattern_includes_diagonal():
    pattern = build_pattern(ENTRIES, IndexPair(3, 3))
    np.testing.assert_array_equal(pattern.ptr, [0, 2, 3, 5])
    np.testing.assert_array_equal(pattern.idx, [0, 2, 1, 0, 2])
    assert pattern.nnz == 5
    np.testing.assert_array_equal(pattern.line(2), [0, 2])


def test_row_pattern_diagonal_first():
    pattern = build_pattern(ENTRIES, IndexPair(3, 3), diagonal_first=True)
    for k in range(3):
        line = list(pattern.line(k))
        assert line[0] == k
        assert k not in line[1:]
        assert line[1:] == sorted(set(line[1:]))
    np.testing.assert_array_equal(pattern.idx, [0, 2, 1, 2, 0])


def test_column_pattern_one_based():
    pattern = build_pattern(ENTRIES, IndexPair(3, 3), row_oriented=False, base=1)
    np.testing.assert_array_equal(pattern.ptr, [1, 3, 4, 6])
    np.testing.assert_array_equal(pattern.idx, [1, 3, 2, 1, 3])
    np.testing.assert_array_equal(pattern.line(0), [1, 3])


def test_rectangular_pattern_skips_missing_diagonal():
    pattern = build_pattern(_entries((3, 0, 1.0)), IndexPair(4, 2))
    np.testing.assert_array_equal(pattern.ptr, [0, 1, 2, 2, 3])
    np.testing.assert_array_equal(pattern.idx, [0, 1, 0])


def test_pattern_rejects_invalid_size_and_outside_entries():
    with pytest.raises(DimensionError, match="invalid pattern size"):
        build_pattern([], IndexPair(0, 3))
    with pytest.raises(DimensionError, match="invalid pattern size"):
        build_pattern([], IndexPair(3, 0))
    with pytest.raises(DimensionError, match="outside matrix"):
        build_pattern(_entries((5, 0, 1.0)), IndexPair(3, 3))
