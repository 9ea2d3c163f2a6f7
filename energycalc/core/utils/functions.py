import numpy as np


def clamp_unit(x):
    """
    Restrict a value to the unit interval [0, 1].

    Parameters
    ----------
    x : float or np.ndarray
        Value to clamp. Arrays are clamped element-wise.

    Returns
    -------
    float or np.ndarray
        0 below the range, 1 above it, ``x`` itself inside.
    """
    if isinstance(x, np.ndarray):
        return np.clip(x, 0.0, 1.0)
    return min(1.0, max(0.0, float(x)))
