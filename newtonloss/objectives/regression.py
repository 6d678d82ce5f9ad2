"""Regression objective: regularized squared error."""

import numpy as np

from newtonloss.metrics.metrics import rmse
from newtonloss.objectives.base import RegularizedObjective
from newtonloss.utils import check_values


class RegularizedSquaredLossObjective(RegularizedObjective):
    """Sum of squared errors with L1/L2 regularized leaf values.

    Loss: L(y, f) = 1/2 * (y - f)^2

    Gradient ∂L/∂f = f - y, hessian ∂²L/∂f² = 1. The hessian is still
    returned as a full array so that tree builders handle every objective
    the same way.

    Parameters
    ----------
    reg_alpha : float
        L1 regularization (default 0.0, no shrinkage).
    reg_lambda : float
        L2 regularization (default 0.0).
    """

    __slots__ = ()

    def initial_prediction(self, values):
        """Mean of ``values``; 0 for an empty sequence."""
        values = check_values(values)
        if values.size == 0:
            return values.dtype.type(0)
        return np.mean(values)

    def gradients(self, observed, values):
        """``values - observed``. Accepts arrays or scalars."""
        return check_values(values) - check_values(observed)

    def hessians(self, observed, values):
        """Ones shaped like ``values``; ``observed`` is not read."""
        values = check_values(values)
        if values.ndim == 0:
            return values.dtype.type(1)
        return np.ones_like(values)

    def residuals(self, observed, f):
        """``observed - f``, the negative gradient at prediction ``f``."""
        return check_values(observed) - check_values(f)

    def loss(self, y, pred):
        diff = check_values(y) - check_values(pred)
        if diff.size == 0:
            return 0.0
        return 0.5 * np.mean(diff ** 2)

    def eval_metric(self, y, pred):
        return rmse(check_values(y), self.transform(check_values(pred)))
