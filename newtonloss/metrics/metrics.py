"""Evaluation metrics: RMSE, Logloss."""

import numpy as np


def rmse(y_true, y_pred):
    return np.sqrt(np.mean((y_true - y_pred) ** 2))


def logloss(y_true, y_pred):
    """Binary log loss. y_pred should be probabilities."""
    p = np.clip(y_pred, 1e-7, 1 - 1e-7)
    return -np.mean(y_true * np.log(p) + (1 - y_true) * np.log(1 - p))
