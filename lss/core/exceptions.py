# lss/core/exceptions.py
"""
Error taxonomy for LSS.
Every error carries an ErrorKind and the payload that identifies the culprit
(filename, size, argument position, pivot position, dtype or config path).
"""
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    FORMAT_DETECTION = "format-detection"
    PARSE = "parse"
    DIMENSION = "dimension"
    NATIVE_ARGUMENT = "native-argument"
    SINGULAR = "singular"
    UNSUPPORTED_PRECISION = "unsupported-precision"
    CONFIG = "config"
    GENERIC = "generic"


class LSSError(Exception):
    """Base exception for LSS errors."""
    kind = ErrorKind.GENERIC

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload


class FormatDetectionError(LSSError):
    """Raised when a filename extension matches no known format."""
    kind = ErrorKind.FORMAT_DETECTION

    def __init__(self, filename: str):
        super().__init__(f'file format not detected ("{filename}").', filename)
        self.filename = filename


class ParseError(LSSError):
    """Raised when a recognised format backend could not parse its input."""
    kind = ErrorKind.PARSE

    def __init__(self, filename: str, message: Optional[str] = None):
        super().__init__(message or f'failed to read "{filename}".', filename)
        self.filename = filename


class DimensionError(LSSError):
    """Raised when sizes are invalid or inconsistent (e.g. non-square solve)."""
    kind = ErrorKind.DIMENSION

    def __init__(self, message: str, size: Any = None):
        super().__init__(message, size)
        self.size = size


class NativeArgumentError(LSSError):
    """Raised when the native routine reports an invalid argument."""
    kind = ErrorKind.NATIVE_ARGUMENT

    def __init__(self, message: str, position: int):
        super().__init__(message, position)
        self.position = position


class SingularMatrixError(LSSError):
    """Raised when factorisation hits an exactly-zero pivot."""
    kind = ErrorKind.SINGULAR

    def __init__(self, message: str, position: int):
        super().__init__(message, position)
        self.position = position


class UnsupportedPrecisionError(LSSError):
    """Raised for a numeric type without a native routine binding."""
    kind = ErrorKind.UNSUPPORTED_PRECISION

    def __init__(self, message: str, dtype: Any):
        super().__init__(message, dtype)
        self.dtype = dtype


class ConfigError(LSSError):
    """Raised when a system description file cannot be read or validated."""
    kind = ErrorKind.CONFIG

    def __init__(self, message: str, path: Any = None):
        super().__init__(message, path)
        self.path = path
