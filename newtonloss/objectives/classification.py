"""Classification objective: regularized binary logloss."""

import numpy as np

from newtonloss.metrics.metrics import logloss
from newtonloss.objectives.base import RegularizedObjective
from newtonloss.utils import check_values


def _sigmoid(x):
    """Numerically stable sigmoid."""
    z = np.exp(-np.abs(x))
    return np.where(x >= 0, 1.0 / (1.0 + z), z / (1.0 + z)).astype(x.dtype)[()]


class RegularizedLogLossObjective(RegularizedObjective):
    """Binary cross-entropy (logloss) on raw log-odds scores.

    Gradient g = p - y and hessian h = p(1 - p) with p = sigmoid(f). Unlike
    squared error the hessian varies per sample, so ``output_value`` and
    ``similarity_score`` weight samples by their curvature.

    Parameters
    ----------
    reg_alpha : float
        L1 regularization (default 0.0).
    reg_lambda : float
        L2 regularization (default 0.0).
    """

    __slots__ = ()

    def initial_prediction(self, values):
        """Log-odds of the positive rate; 0 for an empty sequence."""
        values = check_values(values)
        if values.size == 0:
            return values.dtype.type(0)
        p = np.clip(np.mean(values), 1e-7, 1 - 1e-7)
        return np.log(p / (1 - p))

    def gradients(self, observed, values):
        return _sigmoid(check_values(values)) - check_values(observed)

    def hessians(self, observed, values):
        p = _sigmoid(check_values(values))
        return np.maximum(p * (1 - p), 1e-7).astype(p.dtype)[()]

    def residuals(self, observed, f):
        return check_values(observed) - _sigmoid(check_values(f))

    def loss(self, y, pred):
        y = check_values(y)
        if y.size == 0:
            return 0.0
        return logloss(y, self.transform(check_values(pred)))

    def transform(self, pred):
        return _sigmoid(check_values(pred))

    def eval_metric(self, y, pred):
        return logloss(check_values(y), self.transform(pred))
