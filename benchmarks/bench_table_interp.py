import sys
import gc
import time
import pprint
import numpy as np
from pwlookup import Table1D, Table2D


def benchmark_table1d(rng, nbp, n):
    """Benchmark Table1D.interp on inputs spread past both bounds."""
    gc.collect()  # Clear garbage collector to avoid interference
    x = rng.uniform(-1.0, 11.0, n)
    table = Table1D("bench", nbp).set_bounds(0.0, 10.0)
    table = table.set_response(np.sin(table.breakpoints))
    start_time = time.time_ns()
    z = table.interp(x)
    elapsed_time = time.time_ns() - start_time
    del x, z  # Free memory
    return elapsed_time


def benchmark_table2d(rng, nbp, n):
    """Benchmark Table2D.interp on inputs spread past both bounds."""
    gc.collect()
    xy = rng.uniform(-1.0, 11.0, (n, 2))
    table = Table2D("bench", (nbp, nbp)).set_bounds([0.0, 0.0], [10.0, 10.0])
    mesh_x, mesh_y = np.meshgrid(table.column_breakpoints, table.row_breakpoints)
    table = table.set_response(np.sin(mesh_x) * np.cos(mesh_y))
    start_time = time.time_ns()
    z = table.interp(xy)
    elapsed_time = time.time_ns() - start_time
    del xy, z
    return elapsed_time


if __name__ == "__main__":
    n = int(1e6)
    rng = np.random.default_rng(42)
    breakpoint_counts = [10, 100, 1000]
    benchmarks = {"Table1D": benchmark_table1d, "Table2D": benchmark_table2d}

    print("Python Information:\n", sys.version)
    np.show_config()

    num_replications = 30
    run_times = dict()
    for name, benchmark in benchmarks.items():
        for nbp in breakpoint_counts:
            run_times[(name, nbp)] = [benchmark(rng, nbp, n) for _ in range(num_replications)]

    for (name, nbp), run_time in run_times.items():
        # remove fastest and slowest
        run_times_remove = np.sort(run_time)[1:-1]
        print(
            f"Average time (remove fastest and slowest) for {num_replications} replications with {n} inputs on " +
            f"{name} with {nbp} breakpoints per axis: {np.mean(run_times_remove) / 1e9:.6f} seconds"
        )
        print(f"Standard deviation of run times: {np.std(run_times_remove) / 1e9:.6f} seconds")

    for key, run_time in run_times.items():
        print(f"table - {key}, run_time:")
        pprint.pprint(np.array(run_time) / 1e9)
