"""Evaluation metrics used as objective defaults."""

from newtonloss.metrics.metrics import rmse, logloss

__all__ = ["rmse", "logloss"]
