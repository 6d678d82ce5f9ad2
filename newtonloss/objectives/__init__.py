import logging

from newtonloss.objectives.base import RegularizedObjective
from newtonloss.objectives.regression import RegularizedSquaredLossObjective
from newtonloss.objectives.classification import RegularizedLogLossObjective

logger = logging.getLogger(__name__)

OBJECTIVE_REGISTRY = {
    "sse": RegularizedSquaredLossObjective,
    "squared_error": RegularizedSquaredLossObjective,
    "binary_logloss": RegularizedLogLossObjective,
}


def get_objective(objective="sse", reg_alpha=0.0, reg_lambda=0.0):
    """Resolve an objective for a tree builder.

    Parameters
    ----------
    objective : str, type or RegularizedObjective
        Registry name (see ``OBJECTIVE_REGISTRY``), an objective class, or a
        ready instance. Instances are returned unchanged and keep their own
        regularization.
    reg_alpha, reg_lambda : float
        Regularization passed to the constructor when building a new instance.

    Returns
    -------
    RegularizedObjective
    """
    if isinstance(objective, RegularizedObjective):
        return objective

    if isinstance(objective, str):
        try:
            obj_cls = OBJECTIVE_REGISTRY[objective]
        except KeyError:
            raise ValueError(
                f"Unknown objective {objective!r}, expected one of "
                f"{sorted(OBJECTIVE_REGISTRY)}") from None
    elif isinstance(objective, type) and issubclass(objective, RegularizedObjective):
        obj_cls = objective
    else:
        raise ValueError(
            f"objective must be a name, a RegularizedObjective subclass or "
            f"instance, got {objective!r}")

    obj = obj_cls(reg_alpha=reg_alpha, reg_lambda=reg_lambda)
    logger.debug("Resolved objective %r -> %r", objective, obj)
    return obj


def objective_from_config(config=None):
    """Build an objective from the ``"objective"`` section of a config dict.

    Accepted keys are ``name`` (default ``"sse"``), ``reg_alpha`` (or
    ``alpha``) and ``reg_lambda`` (or ``lambda``). A missing or empty section
    yields the unregularized squared-error objective.

    Example::

        objective_from_config({"objective": {"name": "sse", "lambda": 1.0}})
    """
    obj_cfg = (config or {}).get("objective") or {}
    if isinstance(obj_cfg, str):
        obj_cfg = {"name": obj_cfg}

    name = obj_cfg.get("name", "sse")
    reg_alpha = obj_cfg.get("reg_alpha", obj_cfg.get("alpha", 0.0))
    reg_lambda = obj_cfg.get("reg_lambda", obj_cfg.get("lambda", 0.0))
    return get_objective(name, reg_alpha=reg_alpha, reg_lambda=reg_lambda)


__all__ = [
    "OBJECTIVE_REGISTRY",
    "RegularizedObjective",
    "RegularizedSquaredLossObjective",
    "RegularizedLogLossObjective",
    "get_objective",
    "objective_from_config",
]
