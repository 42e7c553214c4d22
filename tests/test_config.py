import logging

import numpy as np
import pytest
from lss.core.exceptions import ConfigError, ErrorKind, SingularMatrixError
from lss.inout.config import load_system_config
from lss.runner import run_system
from lss.utils.logging_config import get_logger, setup_logging


def test_load_system_config_defaults(tmp_path):
    path = tmp_path / "system.yaml"
    path.write_text("matrix: A.mtx\n")
    config = load_system_config(path)
    assert config.matrix == tmp_path / "A.mtx"
    assert config.rhs is None and config.solution is None
    assert config.precision == "double"
    assert config.dtype == np.float64
    assert config.solver == "lapack"
    assert config.log_level == "INFO"


def test_load_system_config_full(tmp_path):
    path = tmp_path / "system.yaml"
    path.write_text(f"""
matrix: data/A.csr
rhs: {tmp_path / 'b.mtx'}
solution: x0.mtx
precision: single
log_level: DEBUG
""")
    config = load_system_config(path)
    assert config.matrix == tmp_path / "data" / "A.csr"
    assert config.rhs == tmp_path / "b.mtx"
    assert config.solution == tmp_path / "x0.mtx"
    assert config.dtype == np.float32


@pytest.mark.parametrize("content", [
    "rhs: b.mtx\n",                              # matrix missing
    "matrix: A.mtx\nprecision: quad\n",          # unsupported precision
    "matrix: A.mtx\nunknown_key: 1\n",
    "- just\n- a list\n",
    "matrix: [unclosed\n",
])
def test_load_system_config_invalid(tmp_path, content):
    path = tmp_path / "system.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError) as excinfo:
        load_system_config(path)
    assert excinfo.value.kind is ErrorKind.CONFIG


def test_load_system_config_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Failed to read"):
        load_system_config(tmp_path / "absent.yaml")


def test_run_system_end_to_end(tmp_path, write_mtx):
    write_mtx("A.mtx", [[4.0, 1.0], [2.0, 3.0]])
    write_mtx("b.mtx", [1.0, 2.0])
    path = tmp_path / "system.yaml"
    path.write_text("matrix: A.mtx\nrhs: b.mtx\nprecision: single\n")
    system = run_system(path)
    np.testing.assert_allclose(system.solution(), [0.1, 0.6], rtol=1e-5)
    assert system.dtype == np.float32


def test_run_system_logs_failures(tmp_path, write_mtx, caplog):
    write_mtx("A.mtx", [[1.0, 1.0], [1.0, 1.0]])
    write_mtx("b.mtx", [1.0, 2.0])
    path = tmp_path / "system.yaml"
    path.write_text("matrix: A.mtx\nrhs: b.mtx\n")
    caplog.set_level(logging.ERROR)
    with pytest.raises(SingularMatrixError):
        run_system(path)
    assert "singular" in caplog.text


def test_setup_logging_file_handler(tmp_path):
    log_file = tmp_path / "lss.log"
    logger = setup_logging("DEBUG", str(log_file), logger_name="lss.test")
    get_logger("lss.test.child").debug("hello from child")
    for handler in logger.handlers:
        handler.flush()
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "hello from child" in log_file.read_text()
    setup_logging(logging.INFO, logger_name="lss.test")
    assert len(logger.handlers) == 1
