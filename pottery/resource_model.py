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

"""Builds the resource-constrained production model.

The model has one integer variable per vase size and one constraint per raw
resource:

    small + 4 * large <= clay
    small + 2 * large <= glaze

Each variable is bounded by the number of vases of its size that could be made
if every resource was spent on that size alone.
"""

import dataclasses

from pottery import entities
from pottery import solver


@dataclasses.dataclass(frozen=True)
class ResourceModel:
    """Handles to the production model built in a solver session.

    Attributes:
      session: The session owning every handle below.
      supply: The resources the model was built for.
      small: Number of small vases to produce.
      large: Number of large vases to produce.
      clay: Clay consumption constraint.
      glaze: Glaze consumption constraint.
      max_small: Upper bound of `small`.
      max_large: Upper bound of `large`.
    """

    session: solver.SolverSession
    supply: entities.ResourceSupply
    small: solver.VariableHandle
    large: solver.VariableHandle
    clay: solver.ConstraintHandle
    glaze: solver.ConstraintHandle
    max_small: int
    max_large: int


def build_resource_model(
    session: solver.SolverSession, supply: entities.ResourceSupply
) -> ResourceModel:
    """Adds the production variables and resource constraints to `session`.

    A supply of zero collapses the domain of the affected variables to {0}; the
    resulting model is still feasible.

    Args:
      session: An empty solver session.
      supply: The available clay and glaze.

    Returns:
      The handles of the model.
    """
    max_small, max_large = supply.natural_bounds()
    small = session.make_int_var(0, max_small, "small")
    large = session.make_int_var(0, max_large, "large")

    clay = session.make_constraint(0.0, supply.clay, "clay")
    session.set_coefficient(clay, small, entities.SMALL_VASE_CLAY)
    session.set_coefficient(clay, large, entities.LARGE_VASE_CLAY)

    glaze = session.make_constraint(0.0, supply.glaze, "glaze")
    session.set_coefficient(glaze, small, entities.SMALL_VASE_GLAZE)
    session.set_coefficient(glaze, large, entities.LARGE_VASE_GLAZE)

    return ResourceModel(
        session=session,
        supply=supply,
        small=small,
        large=large,
        clay=clay,
        glaze=glaze,
        max_small=max_small,
        max_large=max_large,
    )
