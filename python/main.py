#!/usr/bin/env python3
import math
import sys
import time

from convergence import convergence_table, observed_order
from pi_estimate import estimate_pi
from sweep import DEFAULT_MAX_WORKERS, DEFAULT_STEP_COUNTS, run_sweep, sweep_pairs

MODES = ['run', 'interactive', 'sweep', 'converge']


def usage():
    print(f"Usage: {sys.argv[0]} run <steps> <workers> [kernel] [pool]")
    print(f"       {sys.argv[0]} interactive")
    print(f"       {sys.argv[0]} sweep <output_csv> [max_workers] [steps ...]")
    print(f"       {sys.argv[0]} converge <steps> [steps ...]")
    print("Kernels: python, numpy. Pools: process, thread")
    sys.exit(1)


def run_once(steps, workers, kernel='python', pool='process'):
    start_time = time.time()
    pi = estimate_pi(steps, workers, kernel=kernel, pool=pool)
    elapsed = time.time() - start_time
    print(f"Pi estimate: {pi:.15f}")
    print(f"Error: {abs(math.pi - pi):.3e}")
    print(f"Computation with {workers} workers and {steps} steps took {elapsed:.4f}s")
    return pi


def run_interactive():
    workers = int(input("Number of workers: "))
    steps = int(input("Number of steps: "))
    return run_once(steps, workers)


def run_converge(step_counts):
    steps, estimates, errors = convergence_table(step_counts)
    for n, pi, error in zip(steps, estimates, errors):
        print(f"N={n:>12}  pi={pi:.15f}  error={error:.3e}")
    if len(steps) >= 2:
        print(f"Observed order: {observed_order(steps, errors):.3f}")


def main():
    if len(sys.argv) < 2 or sys.argv[1].lower() not in MODES:
        usage()

    mode = sys.argv[1].lower()
    args = sys.argv[2:]

    try:
        if mode == 'run':
            if not 2 <= len(args) <= 4:
                usage()
            run_once(int(args[0]), int(args[1]), *args[2:])
        elif mode == 'interactive':
            run_interactive()
        elif mode == 'sweep':
            if not args:
                usage()
            output_path = args[0]
            max_workers = int(args[1]) if len(args) > 1 else DEFAULT_MAX_WORKERS
            step_counts = [int(s) for s in args[2:]] or DEFAULT_STEP_COUNTS
            start_time = time.time()
            rows = run_sweep(sweep_pairs(step_counts, max_workers), output_path)
            print(f"Wrote {len(rows)} rows to {output_path} in {time.time() - start_time:.2f}s")
        else:  # converge
            if not args:
                usage()
            run_converge([int(s) for s in args])
    except (ValueError, OSError, EOFError) as e:  # ConfigurationError is a ValueError
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
