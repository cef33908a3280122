"""Dense multi-element matrices with basic numerics, sorting, text, linear algebra and explicit Euler helpers."""

__version__ = "0.1.0"

__all__ = [
    "matrix",
    "matrix_algebra",
    "matrix_utils",
    "sorting",
    "numerics",
    "textutils",
    "ds_utils",
    "linalg",
    "ode",
]