import csv
import time

from pi_estimate import estimate_pi, validate_counts, validate_options

DEFAULT_STEP_COUNTS = (100_000_000, 1_000_000_000, 3_000_000_000)
DEFAULT_MAX_WORKERS = 50

HEADER = ["Liczba krokow", "Liczba watków", "Czas (s)", "Przyblizona liczba PI"]


def sweep_pairs(step_counts, max_workers):
    for steps in step_counts:
        for workers in range(1, max_workers + 1):
            yield steps, workers


def run_sweep(pairs, output_path, kernel="python", pool="process"):
    """Time estimate_pi for each (steps, workers) pair and write the results as CSV.

    The file is opened (and truncated) before anything is computed, so an
    unwritable path fails the whole sweep up front.
    """
    validate_options(kernel, pool)
    pairs = list(pairs)
    for steps, workers in pairs:
        validate_counts(steps, workers)

    rows = []
    with open(output_path, "w", newline="", encoding="utf-8") as fp:
        writer = csv.writer(fp)
        writer.writerow(HEADER)

        for steps, workers in pairs:
            start_time = time.time()
            pi = estimate_pi(steps, workers, kernel=kernel, pool=pool)
            elapsed = time.time() - start_time
            print(f"Steps: {steps}, workers: {workers}, pi: {pi:.15f}, took {elapsed:.4f}s")

            writer.writerow([steps, workers, f"{elapsed:.6f}", repr(pi)])
            fp.flush()
            rows.append((steps, workers, elapsed, pi))

    return rows
