#!/usr/bin/env python3
"""Benchmark script for archbound performance testing.

Builds a synthetic boundary forest and times view construction and a full
check. Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from archbound.domain.model.boundary import Boundary, Dependency, ExactExport
from archbound.domain.model.call import Call, Callee
from archbound.domain.model.configuration import CheckConfig
from archbound.domain.model.location import Location
from archbound.domain.model.module import ModuleInfo
from archbound.infrastructure.adapters.in_memory import InMemoryProvider

APP = "bench_app"
LOCATION = Location(file=Path("bench.py"), line=1)


def benchmark_import_time() -> float:
    """Measure import time of archbound package."""
    start = time.perf_counter()
    import archbound  # noqa: F401

    return time.perf_counter() - start


def build_provider(roots: int, children: int, calls_per_module: int) -> InMemoryProvider:
    """Create `roots` top-level boundaries with `children` sub-boundaries each.

    Every child depends on its next sibling and calls into it, every root
    depends on the next root. Half of the calls hit a private module.
    """
    boundaries: list[Boundary] = []
    modules: list[ModuleInfo] = []
    calls: list[Call] = []

    for r in range(roots):
        root = f"r{r}"
        boundaries.append(
            Boundary(
                name=root,
                app=APP,
                location=LOCATION,
                dependencies=(Dependency(f"r{(r + 1) % roots}"),),
            )
        )
        modules.append(ModuleInfo(name=root, app=APP, boundary=root))

        for c in range(children):
            name = f"{root}.c{c}"
            sibling = f"{root}.c{(c + 1) % children}"
            boundaries.append(
                Boundary(
                    name=name,
                    app=APP,
                    location=LOCATION,
                    ancestors=(root,),
                    dependencies=(Dependency(sibling),),
                    exports=(ExactExport(f"{name}.api"),),
                )
            )
            for suffix in ("", ".api", ".impl"):
                modules.append(ModuleInfo(name=name + suffix, app=APP, boundary=name))

            for i in range(calls_per_module):
                target = f"{sibling}.api" if i % 2 == 0 else f"{sibling}.impl"
                calls.append(
                    Call(
                        caller_module=f"{name}.impl",
                        callee=Callee(module=target, function="run", arity=i % 3),
                        location=Location(file=Path(f"{name}.py"), line=i + 1),
                    )
                )

    return InMemoryProvider(
        app=APP,
        boundaries=tuple(boundaries),
        modules=tuple(modules),
        calls=tuple(calls),
    )


def benchmark_view_build(provider: InMemoryProvider) -> float:
    """Measure BoundaryView construction time."""
    from archbound import BoundaryView

    start = time.perf_counter()
    BoundaryView.build(APP, provider.list_boundaries(), provider.list_modules())
    return time.perf_counter() - start


def benchmark_check(provider: InMemoryProvider, config: CheckConfig) -> tuple[float, int]:
    """Measure full check time, returning (seconds, error_count)."""
    from archbound import BoundaryChecker

    checker = BoundaryChecker.from_config(config)
    start = time.perf_counter()
    result = checker.check(provider)
    return time.perf_counter() - start, result.error_count


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run archbound benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument("--roots", type=int, default=50, help="Top-level boundaries")
    parser.add_argument("--children", type=int, default=20, help="Sub-boundaries per root")
    parser.add_argument("--calls", type=int, default=10, help="Calls per sub-boundary")
    args = parser.parse_args()

    results = []

    # Import time
    import_time = benchmark_import_time()
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": import_time,
        }
    )

    provider = build_provider(args.roots, args.children, args.calls)
    size = f"{len(provider.boundaries)} boundaries, {len(provider.calls)} calls"

    # View construction
    results.append(
        {
            "name": f"View Build ({size})",
            "unit": "seconds",
            "value": benchmark_view_build(provider),
        }
    )

    # Full check, sequential and parallel
    for label, config in (
        ("Sequential", CheckConfig()),
        ("Parallel", CheckConfig(parallel=True)),
    ):
        elapsed, error_count = benchmark_check(provider, config)
        results.append(
            {
                "name": f"{label} Check ({size})",
                "unit": "seconds",
                "value": elapsed,
                "extra": f"{error_count} errors",
            }
        )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
