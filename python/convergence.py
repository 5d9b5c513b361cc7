import math

import numpy as np

from pi_estimate import estimate_pi


def convergence_table(step_counts, num_workers=1, kernel="numpy", pool="thread"):
    steps = np.asarray(step_counts, dtype=np.int64)
    estimates = np.array(
        [estimate_pi(int(n), num_workers, kernel=kernel, pool=pool) for n in steps],
        dtype=np.float64,
    )
    errors = np.abs(estimates - math.pi)
    return steps, estimates, errors


def observed_order(step_counts, errors):
    """Empirical convergence order: minus the slope of log(error) against log(N)."""
    steps = np.asarray(step_counts, dtype=np.float64)
    errors = np.asarray(errors, dtype=np.float64)
    # An exact hit has no logarithm
    mask = errors > 0
    if mask.sum() < 2:
        raise ValueError("Need at least two non-zero errors to fit a convergence order")
    slope, _ = np.polyfit(np.log(steps[mask]), np.log(errors[mask]), 1)
    return -slope
