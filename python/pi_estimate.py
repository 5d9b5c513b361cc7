from concurrent.futures import ThreadPoolExecutor
from multiprocessing import Pool

from integration import ConfigurationError, IntegrationRequest, PartialResult, get_kernel

POOLS = ("process", "thread")


def validate_counts(total_steps, num_workers):
    if num_workers < 1:
        raise ConfigurationError(f"Worker count must be at least 1, got {num_workers}")
    if total_steps < 1:
        raise ConfigurationError(f"Step count must be at least 1, got {total_steps}")
    if total_steps < num_workers:
        raise ConfigurationError(
            f"Step count ({total_steps}) must not be smaller than worker count ({num_workers})"
        )


def validate_options(kernel, pool):
    get_kernel(kernel)
    if pool not in POOLS:
        raise ConfigurationError(f"Unknown pool: {pool} (available: {', '.join(POOLS)})")


def partition(start, end, total_steps, num_workers, redistribute=False):
    """Split [start, end) into one contiguous request per worker.

    Every worker gets total_steps // num_workers steps. The remainder is
    dropped unless `redistribute` is set, in which case the last worker
    takes it. The step size is computed once and shared by all requests.
    """
    step_size = (end - start) / total_steps
    steps_per_worker = total_steps // num_workers
    remainder = total_steps % num_workers

    requests = []
    for i in range(num_workers):
        steps = steps_per_worker
        if redistribute and i == num_workers - 1:
            steps += remainder
        worker_start = start + i * steps_per_worker * step_size
        requests.append(IntegrationRequest(worker_start, worker_start + steps * step_size, steps, step_size))
    return requests


def integrate_worker(args):
    worker_index, request, kernel_name = args
    kernel = get_kernel(kernel_name)
    return PartialResult(worker_index, kernel(*request))


def reduce_partials(results):
    total = 0.0
    for result in sorted(results, key=lambda r: r.worker_index):
        total += result.value
    return total


def integrate_parallel(start, end, total_steps, num_workers,
                       kernel="python", pool="process", redistribute=False):
    validate_counts(total_steps, num_workers)
    if not end > start:
        raise ConfigurationError(f"Interval end ({end}) must be greater than start ({start})")
    validate_options(kernel, pool)

    requests = partition(start, end, total_steps, num_workers, redistribute)
    tasks = [(i, request, kernel) for i, request in enumerate(requests)]

    if pool == "process":
        with Pool(processes=num_workers) as workers:
            results = workers.map(integrate_worker, tasks)
    else:
        with ThreadPoolExecutor(max_workers=num_workers) as executor:
            futures = [executor.submit(integrate_worker, task) for task in tasks]
            results = [future.result() for future in futures]

    return reduce_partials(results)


def estimate_pi(total_steps, num_workers, kernel="python", pool="process", redistribute=False):
    return integrate_parallel(0.0, 1.0, total_steps, num_workers,
                              kernel=kernel, pool=pool, redistribute=redistribute)
