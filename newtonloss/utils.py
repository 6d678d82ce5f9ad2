"""Utility functions for newtonloss."""

import numpy as np


def check_values(values):
    """Convert a sequence of observed or predicted values to a numpy array.

    Floating arrays keep their dtype so ``float32`` inputs produce ``float32``
    outputs; integer and boolean inputs are promoted to ``float64``. Scalars
    come back as 0-d arrays. No copy is made when ``values`` is already a
    floating array.
    """
    values = np.asarray(values)
    if values.dtype.kind != "f":
        values = values.astype(np.float64)
    return values
