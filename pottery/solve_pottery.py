# Copyright 2010-2025 Google LLC
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Prints the production targets for a given clay and glaze supply.

Examples:
  solve_pottery --clay=4 --glaze=2
  solve_pottery --clay=12 --glaze=8 --feasible
"""

from collections.abc import Iterator, Sequence
import contextlib

from absl import app
from absl import flags

from pottery import optimizer
from pottery import solver

_CLAY = flags.DEFINE_float("clay", 0.0, "Units of clay available.")
_GLAZE = flags.DEFINE_float("glaze", 0.0, "Units of glaze available.")
_SOLVER = flags.DEFINE_string(
    "solver", solver.DEFAULT_SOLVER_KIND, "Solver backend to solve the model with."
)
_FEASIBLE = flags.DEFINE_bool(
    "feasible",
    False,
    "List every feasible target instead of the optimal one. This solves the"
    " model once per candidate target and is only usable on small supplies.",
)
_SOLVER_OUTPUT = flags.DEFINE_bool(
    "solver_output", False, "Enable the output of the solver."
)


@contextlib.contextmanager
def _open_session(kind: str) -> Iterator[solver.SolverSession]:
    with solver.open_session(kind) as session:
        if _SOLVER_OUTPUT.value:
            session.enable_output()
        yield session


def main(argv: Sequence[str]) -> None:
    """Computes and prints the production targets."""
    if len(argv) > 1:
        raise app.UsageError("Too many command-line arguments.")
    if _CLAY.value < 0 or _GLAZE.value < 0:
        raise app.UsageError("--clay and --glaze must be non-negative.")

    planner = optimizer.LinearSolverOptimizer(
        solver_kind=_SOLVER.value, session_factory=_open_session
    )
    if _FEASIBLE.value:
        targets = planner.get_feasible_targets(_CLAY.value, _GLAZE.value)
        print(f"{len(targets)} feasible targets:")
        for target in targets:
            print(
                f"  small = {target.small}, large = {target.large},"
                f" profit = {target.profit()}"
            )
    else:
        target = planner.get_targets(_CLAY.value, _GLAZE.value)
        print(f"Small vases = {target.small}")
        print(f"Large vases = {target.large}")
        print(f"Profit = {target.profit()}")


def run() -> None:
    app.run(main)


if __name__ == "__main__":
    run()
