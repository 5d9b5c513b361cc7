from collections import namedtuple

import numpy as np

# Elements per vectorised chunk; bounds the numpy kernel's memory use
CHUNK_SIZE = 1 << 20

IntegrationRequest = namedtuple("IntegrationRequest", ["start", "end", "steps", "step_size"])
PartialResult = namedtuple("PartialResult", ["worker_index", "value"])


class ConfigurationError(ValueError):
    pass


def f(x):
    return 4.0 / (1.0 + x * x)


def integrate(start, end, steps, step_size):
    """Midpoint rule over `steps` rectangles of width `step_size` starting at `start`.

    The sum is accumulated left to right with plain float addition. Arguments
    are not validated; `end` only documents the interval being covered.
    """
    total = 0.0
    for i in range(steps):
        x = start + i * step_size + step_size / 2.0  # midpoint of rectangle i
        total += f(x) * step_size
    return total


def integrate_numpy(start, end, steps, step_size, chunk_size=CHUNK_SIZE):
    """Vectorised `integrate`.

    Terms are evaluated a chunk at a time and folded into the running total
    with np.cumsum, which accumulates sequentially, so the result matches the
    pure Python loop.
    """
    total = 0.0
    half = step_size / 2.0
    for offset in range(0, steps, chunk_size):
        i = np.arange(offset, min(offset + chunk_size, steps), dtype=np.float64)
        x = start + i * step_size + half
        terms = 4.0 / (1.0 + x * x) * step_size
        total = float(np.cumsum(np.concatenate(([total], terms)))[-1])
    return total


KERNELS = {
    "python": integrate,
    "numpy": integrate_numpy,
}


def get_kernel(name):
    try:
        return KERNELS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown kernel: {name} (available: {', '.join(KERNELS)})"
        ) from None
