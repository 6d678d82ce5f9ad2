"""newtonloss - regularized second-order loss objectives for gradient-boosted trees.

Supplies what a tree builder needs at every node: the initial prediction,
per-sample gradients and hessians, pseudo residuals, the closed-form leaf
output under combined L1/L2 regularization, and the similarity score used
to rank candidate splits.

Objectives:
- RegularizedSquaredLossObjective (sum of squared errors)
- RegularizedLogLossObjective (binary cross-entropy)
"""

from newtonloss.objectives import (
    OBJECTIVE_REGISTRY,
    RegularizedObjective,
    RegularizedSquaredLossObjective,
    RegularizedLogLossObjective,
    get_objective,
    objective_from_config,
)
from newtonloss.core.regularization import soft_threshold, check_regularization
from newtonloss.metrics.metrics import rmse, logloss

__version__ = "0.1.0"
__all__ = [
    # 目的関数
    "RegularizedObjective",
    "RegularizedSquaredLossObjective",
    "RegularizedLogLossObjective",
    # 設定
    "OBJECTIVE_REGISTRY",
    "get_objective",
    "objective_from_config",
    # 正則化
    "soft_threshold",
    "check_regularization",
    # 評価指標
    "rmse",
    "logloss",
]
