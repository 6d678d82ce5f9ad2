"""Base class for regularized second-order (Newton) boosting objectives."""

from abc import ABC, abstractmethod

from newtonloss.core.regularization import check_regularization, soft_threshold
from newtonloss.utils import check_values


class RegularizedObjective(ABC):
    """Loss objective consumed by a gradient-boosted tree builder.

    A tree builder treats the objective as an opaque strategy. Before the
    first tree it asks for ``initial_prediction``; at every node it asks for
    per-sample ``gradients`` / ``hessians``, ranks candidate regions with
    ``similarity_score`` and assigns leaves their ``output_value``; after a
    tree is added it uses ``residuals`` for the next round.

    Subclasses supply the loss-specific derivatives. The leaf optimum and
    the similarity score follow from the second-order Taylor expansion of
    the total loss at a leaf and are shared by every loss:

        w*    = -S_alpha(G) / (H + lambda)
        score =  S_alpha(G)^2 / (H + lambda)

    where G and H are the summed gradients and hessians of the samples in
    the leaf and S_alpha is soft-thresholding (L1 regularization).

    Parameters
    ----------
    reg_alpha : float
        L1 regularization (default 0.0). Must be finite and >= 0.
    reg_lambda : float
        L2 regularization (default 0.0). Must be finite and >= 0.
    """

    __slots__ = ("_reg_alpha", "_reg_lambda")

    def __init__(self, reg_alpha=0.0, reg_lambda=0.0):
        self._reg_alpha, self._reg_lambda = check_regularization(
            reg_alpha, reg_lambda)

    @property
    def reg_alpha(self):
        """L1 regularization strength."""
        return self._reg_alpha

    @property
    def reg_lambda(self):
        """L2 regularization strength."""
        return self._reg_lambda

    def __repr__(self):
        return (f"{type(self).__name__}(reg_alpha={self._reg_alpha!r}, "
                f"reg_lambda={self._reg_lambda!r})")

    # --- Loss-specific operations ---

    @abstractmethod
    def initial_prediction(self, values):
        """Constant raw score used for every sample before the first tree."""

    @abstractmethod
    def gradients(self, observed, values):
        """First derivative of the per-sample loss w.r.t. ``values``."""

    @abstractmethod
    def hessians(self, observed, values):
        """Second derivative of the per-sample loss w.r.t. ``values``."""

    @abstractmethod
    def residuals(self, observed, f):
        """Pseudo residuals (negative gradient) at the current prediction ``f``."""

    @abstractmethod
    def loss(self, y, pred):
        """Mean per-sample loss of raw predictions ``pred``."""

    def transform(self, pred):
        """Map raw scores to the prediction space (identity by default)."""
        return pred

    # --- Shared Newton-step operations ---

    def output_value(self, gradients, hessians):
        """Regularized optimal output of a leaf.

        Parameters
        ----------
        gradients : array-like of shape (n_samples,)
            Gradients of the samples routed to the leaf.
        hessians : array-like of shape (n_samples,)
            Hessians of the same samples.

        Returns
        -------
        float
            ``-S_alpha(sum(gradients)) / (sum(hessians) + reg_lambda)``, or 0
            for an empty leaf without L2 regularization. The scalar type
            follows the dtype of ``gradients``.
        """
        gradients = check_values(gradients)
        hessians = check_values(hessians)
        denominator = hessians.sum() + self._reg_lambda
        if denominator == 0:
            return gradients.dtype.type(0)
        return gradients.dtype.type(
            -self._apply_l1(gradients.sum()) / denominator)

    def similarity_score(self, observed, residuals, begin, end):
        """Similarity score of the samples ``begin..end`` (both inclusive).

        The score is the loss reduction obtained by giving this range its own
        leaf. Split search compares the children's scores against the
        parent's; only relative values matter.

        Parameters
        ----------
        observed : array-like of shape (n_samples,)
            Observed target values.
        residuals : array-like of shape (n_samples,)
            Current predictions, index-aligned with ``observed``.
        begin, end : int
            Inclusive bounds, ``0 <= begin <= end < n_samples``.

        Returns
        -------
        float
            ``S_alpha(sum(g))**2 / (sum(h) + reg_lambda)``, never negative.
        """
        observed = check_values(observed)[begin:end + 1]
        residuals = check_values(residuals)[begin:end + 1]
        gradients = self.gradients(observed, residuals)
        hessians = self.hessians(observed, residuals)

        denominator = hessians.sum() + self._reg_lambda
        if denominator == 0:
            return gradients.dtype.type(0)
        return gradients.dtype.type(
            self._apply_l1(gradients.sum()) ** 2 / denominator)

    def _apply_l1(self, sum_gradients):
        return soft_threshold(sum_gradients, self._reg_alpha)

    # --- Aliases for engines calling gradient(y, pred) / hessian(y, pred) ---

    def init_score(self, y):
        return self.initial_prediction(y)

    def gradient(self, y, pred):
        return self.gradients(y, pred)

    def hessian(self, y, pred):
        return self.hessians(y, pred)
