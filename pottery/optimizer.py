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

"""Computes production targets for the pottery shop.

Two operations are offered:

* `get_targets()` returns the production target with the highest profit.
* `get_feasible_targets()` lists every production target the resources allow.

`get_feasible_targets()` calls the solver once per candidate pair of vase
counts. Its running time and memory grow with the product of the two natural
bounds, so it is only meant for exploring small instances and must not be used
on production-scale supplies.
"""

import abc
from collections.abc import Callable
import contextlib
from typing import List

from absl import logging

from pottery import entities
from pottery import errors
from pottery import resource_model
from pottery import solver

SessionFactory = Callable[
    [str], contextlib.AbstractContextManager[solver.SolverSession]
]

_NOT_OPTIMAL_MESSAGE = "Optimal solution not found!"


class PotteryOptimizer(metaclass=abc.ABCMeta):
    """Computes production targets from a clay and glaze supply."""

    @abc.abstractmethod
    def get_targets(
        self, clay_supply: float, glaze_supply: float
    ) -> entities.ProductionTarget:
        """Returns the most profitable production target."""

    @abc.abstractmethod
    def get_feasible_targets(
        self, clay_supply: float, glaze_supply: float
    ) -> List[entities.ProductionTarget]:
        """Returns every production target allowed by the supplies."""


class LinearSolverOptimizer(PotteryOptimizer):
    """A `PotteryOptimizer` solving integer models with a linear solver.

    Every call opens its own solver session and releases it before returning,
    so an optimizer can be reused for any number of calls.
    """

    def __init__(
        self,
        solver_kind: str = solver.DEFAULT_SOLVER_KIND,
        session_factory: SessionFactory = solver.open_session,
    ) -> None:
        """Creates the optimizer.

        Args:
          solver_kind: Name of the solver backend, see `solver.create_session`.
          session_factory: Returns a context manager yielding a new session for
            a backend name.
        """
        self._solver_kind = solver_kind
        self._session_factory = session_factory

    @property
    def solver_kind(self) -> str:
        return self._solver_kind

    def get_targets(
        self, clay_supply: float, glaze_supply: float
    ) -> entities.ProductionTarget:
        """Returns the production target maximizing 3 * small + 9 * large.

        Args:
          clay_supply: Units of clay available, non-negative.
          glaze_supply: Units of glaze available, non-negative.

        Returns:
          The optimal target.

        Raises:
          ConfigurationError: The solver backend could not be created.
          OptimizationError: The solver did not find an optimal solution.
        """
        supply = entities.ResourceSupply(clay=clay_supply, glaze=glaze_supply)
        with self._session_factory(self._solver_kind) as session:
            model = resource_model.build_resource_model(session, supply)
            logging.vlog(
                1,
                "Production model for %s: small <= %d, large <= %d",
                supply,
                model.max_small,
                model.max_large,
            )

            session.set_objective_coefficient(
                model.small, entities.SMALL_VASE_PROFIT
            )
            session.set_objective_coefficient(
                model.large, entities.LARGE_VASE_PROFIT
            )
            session.set_objective_direction(maximize=True)

            status = session.solve()
            if status != solver.SolveStatus.OPTIMAL:
                logging.warning(
                    "Solve for %s ended with status %s", supply, status.name
                )
                raise errors.OptimizationError(_NOT_OPTIMAL_MESSAGE)

            # Integer variables may come back as near-integral floats.
            target = entities.ProductionTarget(
                small=round(session.solution_value(model.small)),
                large=round(session.solution_value(model.large)),
            )
        logging.info("Optimal target for %s: %s", supply, target)
        return target

    def get_feasible_targets(
        self, clay_supply: float, glaze_supply: float
    ) -> List[entities.ProductionTarget]:
        """Returns every production target allowed by the supplies.

        Each candidate (small, large) pair within the natural bounds is tested by
        pinning both variables to the pair and solving the model again. Pairs are
        visited with `small` in the outer loop and `large` in the inner loop, and
        the feasible ones are returned in that order. The model is solved
        (max_small + 1) * (max_large + 1) times: do not use this on large
        supplies.

        Testing a pair with a solve rather than with arithmetic keeps the check
        valid for any constraint added to the model.

        Args:
          clay_supply: Units of clay available, non-negative.
          glaze_supply: Units of glaze available, non-negative.

        Returns:
          The feasible targets, never empty for non-negative supplies since
          (0, 0) is always feasible.

        Raises:
          ConfigurationError: The solver backend could not be created.
        """
        supply = entities.ResourceSupply(clay=clay_supply, glaze=glaze_supply)
        targets = []
        with self._session_factory(self._solver_kind) as session:
            model = resource_model.build_resource_model(session, supply)

            # Constraints used to pin each variable to a candidate value.
            pin_small = session.make_constraint(0.0, model.max_small, "pin_small")
            session.set_coefficient(pin_small, model.small, 1)
            pin_large = session.make_constraint(0.0, model.max_large, "pin_large")
            session.set_coefficient(pin_large, model.large, 1)

            logging.vlog(
                1,
                "Enumerating %d candidate targets for %s",
                (model.max_small + 1) * (model.max_large + 1),
                supply,
            )
            for n_small in range(model.max_small + 1):
                for n_large in range(model.max_large + 1):
                    session.set_bounds(pin_small, n_small, n_small)
                    session.set_bounds(pin_large, n_large, n_large)
                    status = session.solve()
                    logging.vlog(
                        1, "small=%d large=%d: %s", n_small, n_large, status.name
                    )
                    if status == solver.SolveStatus.OPTIMAL:
                        targets.append(
                            entities.ProductionTarget(small=n_small, large=n_large)
                        )
        logging.info("Found %d feasible targets for %s", len(targets), supply)
        return targets
