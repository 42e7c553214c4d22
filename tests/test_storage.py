import numpy as np
import pytest
from lss.core.exceptions import DimensionError, LSSError
from lss.core.storage import DenseStorage
from lss.inout.types import SparseData
from lss.core.index import IndexPair


def test_new_storage_is_empty():
    s = DenseStorage()
    assert s.is_empty()
    assert s.shape == (0, 0)
    assert s.size == IndexPair(0, 0)


def test_resize_fills_and_discards():
    s = DenseStorage(np.float32).resize(2, 3, value=1.5)
    assert s.shape == (2, 3)
    assert s.buffer.dtype == np.float32
    np.testing.assert_array_equal(s.array, np.full((2, 3), 1.5))
    s[0, 1] = 7.0
    s.resize(2, 3)
    assert s[0, 1] == 0.0


@pytest.mark.parametrize("row_oriented, expected", [
    (True, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]),
    (False, [1.0, 4.0, 2.0, 5.0, 3.0, 6.0]),
])
def test_orientation_defines_buffer_layout(row_oriented, expected):
    s = DenseStorage(row_oriented=row_oriented).resize(2, 3)
    s.assign_values([1, 2, 3, 4, 5, 6])
    np.testing.assert_array_equal(s.buffer, expected)
    np.testing.assert_array_equal(s.array, [[1, 2, 3], [4, 5, 6]])
    assert s[1, 0] == 4.0


def test_assign_checks_shape():
    s = DenseStorage().resize(2, 2)
    with pytest.raises(DimensionError):
        s.assign(np.zeros((3, 2)))
    with pytest.raises(DimensionError, match="expected 4 values"):
        s.assign_values([1.0, 2.0, 3.0])


def test_assign_sparse_scatters_entries():
    s = DenseStorage(row_oriented=False).resize(2, 3, value=9.0)
    data = SparseData(size=IndexPair(2, 3),
                      values=np.array([1.0, 2.0]),
                      row_indices=np.array([1, 2]),
                      col_indices=np.array([3, 1]),
                      base=1)
    s.assign_sparse(data)
    np.testing.assert_array_equal(s.array, [[0.0, 0.0, 1.0], [2.0, 0.0, 0.0]])


def test_fortran_copy_is_independent():
    s = DenseStorage().resize(2, 2).assign_values([1, 2, 3, 4])
    f = s.fortran_copy()
    assert f.flags.f_contiguous
    f[0, 0] = 100.0
    assert s[0, 0] == 1.0


def test_swap_and_clear():
    a = DenseStorage().resize(2, 1).assign_values([1, 2])
    b = DenseStorage().resize(3, 1, value=5.0)
    a.swap(b)
    assert a.shape == (3, 1) and b.shape == (2, 1)
    np.testing.assert_array_equal(b.array, [[1.0], [2.0]])
    a.clear()
    assert a.is_empty()
    with pytest.raises(LSSError, match="identical dtype"):
        a.swap(DenseStorage(np.float32))
