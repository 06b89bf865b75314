import sys
import gc
import time
import pprint
import numpy as np
from scatsmooth import build_default_registry


def benchmark_smoother(rng, registry, smoother_id, n, x, grid):
    """Benchmark fitting one registered smoother and evaluating it on the grid."""
    gc.collect()  # Clear garbage collector to avoid interference
    y = np.sin(2.0 * np.pi * x) + 0.3 * rng.standard_normal(n)
    start_time = time.time_ns()
    fit = registry.lookup(smoother_id).factory()
    y_new = fit(x, y)(grid)
    elapsed_time = time.time_ns() - start_time
    del y, y_new  # Free memory
    return elapsed_time


if __name__ == "__main__":
    n = 500
    x = np.sort(np.random.default_rng(0).uniform(0.0, 1.0, n))
    grid = np.arange(0.0, 1.0, 0.01)
    rng = np.random.default_rng(42)
    registry = build_default_registry()

    print("Python Information:\n", sys.version)
    np.show_config()

    num_replications = 30
    run_times = dict()
    for smoother_id in registry:
        run_times[smoother_id] = []
        for i in range(num_replications):
            # Generate y with some noise each time to simulate different data
            run_times[smoother_id].append(benchmark_smoother(rng, registry, smoother_id, n, x, grid))

    for smoother_id in registry:
        # remove fastest and slowest
        run_times_remove = np.sort(run_times[smoother_id])[1:-1]

        print(
            f"Average time (remove fastest and slowest) for {num_replications} replications with sample size {n} on " +
            f"'{smoother_id}' with default hyperparameters runs: {np.mean(run_times_remove) / 1e9:.6f} seconds"
        )
        print(f"Standard deviation of run times: {np.std(run_times_remove) / 1e9:.6f} seconds")

    for smoother_id, run_time in run_times.items():
        print(f"smoother - {smoother_id}, run_time:")
        pprint.pprint(np.array(run_time) / 1e9)
