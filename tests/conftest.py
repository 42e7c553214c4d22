import numpy as np
import pytest
import scipy.sparse as sp
from scipy.io import hb_write

# [[2, 0, 5], [0, 3, 0], [-1, 0, 0]] in each on-disk layout
SPARSE_3X3 = np.array([[2.0, 0.0, 5.0],
                       [0.0, 3.0, 0.0],
                       [-1.0, 0.0, 0.0]])

DENSE_3X3 = np.array([[1.0, 2.0, 3.0],
                      [4.0, 5.0, 6.0],
                      [7.0, 8.0, 9.5]])

MTX_ARRAY = """%%MatrixMarket matrix array real general
% column-major listing of DENSE_3X3
3 3
1
4
7
2
5
8
3
6
9.5
"""

MTX_COORDINATE = """%%MatrixMarket matrix coordinate real general
3 3 4
1 1 2.0
2 2 3.0
3 1 -1.0
1 3 5.0
"""

CSR_TEXT = """% SPARSE_3X3 in compressed rows
3 3 4
1 3 4 5
1 3
2
1
2.0 5.0 3.0 -1.0
"""


@pytest.fixture
def dense_mtx(tmp_path):
    path = tmp_path / "dense.mtx"
    path.write_text(MTX_ARRAY)
    return path


@pytest.fixture
def coord_mtx(tmp_path):
    path = tmp_path / "coord.mtx"
    path.write_text(MTX_COORDINATE)
    return path


@pytest.fixture
def csr_file(tmp_path):
    path = tmp_path / "matrix.csr"
    path.write_text(CSR_TEXT)
    return path


@pytest.fixture
def rua_file(tmp_path):
    path = tmp_path / "matrix.rua"
    hb_write(str(path), sp.csc_matrix(SPARSE_3X3))
    return path


@pytest.fixture
def write_mtx(tmp_path):
    """Write a dense matrix (or vector) as a Matrix Market array file."""
    def _write(name, M):
        M = np.asarray(M, dtype=float)
        if M.ndim == 1:
            M = M.reshape(-1, 1)
        lines = ["%%MatrixMarket matrix array real general", f"{M.shape[0]} {M.shape[1]}"]
        lines += [repr(float(v)) for v in M.ravel(order="F")]
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return path
    return _write
