"""Activation functions and scoring helpers for simple classifiers."""

from __future__ import annotations

import math

from numlab.matrix import Matrix
from numlab.matrix_utils import corr


def relu(value: float) -> float:
    """Rectified linear unit: ``max(0, value)``."""
    return max(0.0, value)


def sigmoid(value: float) -> float:
    """Logistic function ``1 / (1 + exp(-value))``."""
    return 1.0 / (1.0 + math.exp(-value))


def sigmoid_matrix(values: Matrix) -> Matrix:
    """Apply :func:`sigmoid` to every value of ``values``."""
    return values.apply(sigmoid)


def accuracy(predictions: Matrix, ground_truth: Matrix) -> float:
    """Share of equal values between predictions and ground truth, per prediction row."""
    if predictions.rows == 0:
        raise ValueError("accuracy of an empty prediction set")
    return corr(predictions, ground_truth) / predictions.rows