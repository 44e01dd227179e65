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

"""Linear solver capability used by the pottery optimizer.

The optimizer only needs a handful of operations from a linear/integer solver:
create bounded integer variables, create linear constraints and change their
bounds, set a linear objective, solve, and read back the solution. They are
declared by `SolverSession`. `LinearSolverSession` implements them with the
OR-Tools `pywraplp` wrapper.

Sessions hold native solver resources. Use `open_session()` to get a session
that is released when the `with` block exits, whether it exits normally or
with an error.
"""

import abc
from collections.abc import Iterator
import contextlib
import enum
from typing import Any, Union

from absl import logging

from ortools.linear_solver import pywraplp

from pottery import errors

# Opaque handles returned by a session. They are only meaningful to the session
# that created them.
VariableHandle = Any
ConstraintHandle = Any
_BoundedHandle = Union[VariableHandle, ConstraintHandle]

DEFAULT_SOLVER_KIND = "SCIP"


@enum.unique
class SolveStatus(enum.Enum):
    """Outcome of a solve.

    Attributes:
      OPTIMAL: An optimal solution was found. For a model without objective this
        means the model is feasible.
      INFEASIBLE: The model has no solution.
      UNBOUNDED: The objective can be improved without limit.
      OTHER: Any other outcome (time limit, numerical trouble, invalid model).
    """

    OPTIMAL = enum.auto()
    INFEASIBLE = enum.auto()
    UNBOUNDED = enum.auto()
    OTHER = enum.auto()


_PYWRAPLP_STATUS = {
    pywraplp.Solver.OPTIMAL: SolveStatus.OPTIMAL,
    pywraplp.Solver.INFEASIBLE: SolveStatus.INFEASIBLE,
    pywraplp.Solver.UNBOUNDED: SolveStatus.UNBOUNDED,
}


class SolverSession(metaclass=abc.ABCMeta):
    """A single linear/integer model together with the solver that solves it."""

    @abc.abstractmethod
    def make_int_var(
        self, lower_bound: float, upper_bound: float, name: str = ""
    ) -> VariableHandle:
        """Creates an integer variable in [lower_bound, upper_bound]."""

    @abc.abstractmethod
    def make_constraint(
        self, lower_bound: float, upper_bound: float, name: str = ""
    ) -> ConstraintHandle:
        """Creates the empty constraint lower_bound <= 0 <= upper_bound."""

    @abc.abstractmethod
    def set_coefficient(
        self,
        constraint: ConstraintHandle,
        variable: VariableHandle,
        coefficient: float,
    ) -> None:
        """Sets the coefficient of `variable` in `constraint`."""

    @abc.abstractmethod
    def set_objective_coefficient(
        self, variable: VariableHandle, coefficient: float
    ) -> None:
        """Sets the coefficient of `variable` in the objective."""

    @abc.abstractmethod
    def set_objective_direction(self, maximize: bool) -> None:
        """Makes the objective a maximization (or a minimization)."""

    @abc.abstractmethod
    def set_bounds(
        self, handle: _BoundedHandle, lower_bound: float, upper_bound: float
    ) -> None:
        """Changes the bounds of a variable or of a constraint."""

    @abc.abstractmethod
    def solve(self) -> SolveStatus:
        """Solves the current model."""

    @abc.abstractmethod
    def solution_value(self, variable: VariableHandle) -> float:
        """Returns the value of `variable` in the last solution found."""

    @abc.abstractmethod
    def close(self) -> None:
        """Releases the solver. The session can't be used afterwards."""


class LinearSolverSession(SolverSession):
    """A `SolverSession` backed by a `pywraplp.Solver`."""

    def __init__(self, solver: pywraplp.Solver) -> None:
        self._solver = solver

    @property
    def solver(self) -> pywraplp.Solver:
        """The wrapped pywraplp solver."""
        if self._solver is None:
            raise ValueError("the solver session is closed")
        return self._solver

    @property
    def closed(self) -> bool:
        return self._solver is None

    def make_int_var(
        self, lower_bound: float, upper_bound: float, name: str = ""
    ) -> pywraplp.Variable:
        return self.solver.IntVar(lower_bound, upper_bound, name)

    def make_constraint(
        self, lower_bound: float, upper_bound: float, name: str = ""
    ) -> pywraplp.Constraint:
        return self.solver.Constraint(lower_bound, upper_bound, name)

    def set_coefficient(
        self,
        constraint: pywraplp.Constraint,
        variable: pywraplp.Variable,
        coefficient: float,
    ) -> None:
        constraint.SetCoefficient(variable, coefficient)

    def set_objective_coefficient(
        self, variable: pywraplp.Variable, coefficient: float
    ) -> None:
        self.solver.Objective().SetCoefficient(variable, coefficient)

    def set_objective_direction(self, maximize: bool) -> None:
        if maximize:
            self.solver.Objective().SetMaximization()
        else:
            self.solver.Objective().SetMinimization()

    def set_bounds(
        self,
        handle: Union[pywraplp.Variable, pywraplp.Constraint],
        lower_bound: float,
        upper_bound: float,
    ) -> None:
        handle.SetBounds(lower_bound, upper_bound)

    def solve(self) -> SolveStatus:
        status = self.solver.Solve()
        return _PYWRAPLP_STATUS.get(status, SolveStatus.OTHER)

    def solution_value(self, variable: pywraplp.Variable) -> float:
        return variable.solution_value()

    def enable_output(self) -> None:
        """Lets the underlying solver print its log."""
        self.solver.EnableOutput()

    def close(self) -> None:
        if self._solver is not None:
            self._solver.Clear()
            self._solver = None


def create_session(kind: str = DEFAULT_SOLVER_KIND) -> LinearSolverSession:
    """Creates a session on the pywraplp backend named `kind`.

    Args:
      kind: A backend name accepted by `pywraplp.Solver.CreateSolver`, for
        instance "SCIP" or "CBC". The backend must handle integer variables.

    Returns:
      A new, empty session.

    Raises:
      ConfigurationError: The backend is unknown or not linked in, or it
        only solves continuous models.
    """
    solver = pywraplp.Solver.CreateSolver(kind)
    if not solver:
        logging.warning("Could not create a solver with backend %r", kind)
        raise errors.ConfigurationError(f"Could not create solver {kind!r}")
    if not solver.IsMip():
        logging.warning(
            "Solver backend %r does not handle integer variables", kind
        )
        raise errors.ConfigurationError(
            f"Solver {kind!r} does not handle integer variables"
        )
    return LinearSolverSession(solver)


@contextlib.contextmanager
def open_session(
    kind: str = DEFAULT_SOLVER_KIND,
) -> Iterator[LinearSolverSession]:
    """Yields a new session and closes it when the context exits."""
    session = create_session(kind)
    try:
        yield session
    finally:
        session.close()
