"""L1 / L2 正則化ヘルパー。"""

import math

import numpy as np


def check_regularization(reg_alpha, reg_lambda):
    """Validate a pair of regularization strengths.

    Parameters
    ----------
    reg_alpha : float
        L1 regularization on the aggregated gradient of a leaf.
    reg_lambda : float
        L2 regularization on leaf weights.

    Returns
    -------
    (float, float)
        ``reg_alpha`` and ``reg_lambda`` as Python floats.
    """
    reg_alpha = float(reg_alpha)
    reg_lambda = float(reg_lambda)
    if not math.isfinite(reg_alpha) or reg_alpha < 0.0:
        raise ValueError(f"reg_alpha must be a finite value >= 0.0, got {reg_alpha}")
    if not math.isfinite(reg_lambda) or reg_lambda < 0.0:
        raise ValueError(f"reg_lambda must be a finite value >= 0.0, got {reg_lambda}")
    return reg_alpha, reg_lambda


def soft_threshold(value, alpha):
    """L1 proximal operator.

    Shrinks ``value`` toward zero by ``alpha``, clamping to zero when
    ``|value| <= alpha``:

        S(g) = g - alpha   if g >  alpha
        S(g) = g + alpha   if g < -alpha
        S(g) = 0           otherwise

    Works element-wise on arrays (e.g. per-bin gradient sums of a histogram)
    as well as on a single gradient sum.

    Parameters
    ----------
    value : float or np.ndarray
        Aggregated gradient(s).
    alpha : float
        Non-negative shrinkage amount.

    Returns
    -------
    float or np.ndarray
        Same shape as ``value``. Floating dtypes are kept.
    """
    value = np.asarray(value)
    if value.dtype.kind != "f":
        value = value.astype(np.float64)
    if alpha == 0.0:
        return value[()]
    shrunk = np.where(np.abs(value) > alpha, value - np.sign(value) * alpha, 0.0)
    # [()] unwraps 0-d results to a numpy scalar
    return shrunk.astype(value.dtype, copy=False)[()]
