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

"""Records exchanged with the pottery optimizer.

Both records are immutable. A `ProductionTarget` is created fresh for every
result, a `ResourceSupply` is created by the caller for every call.
"""

import dataclasses
import math
from typing import Tuple

# Resource consumption per vase.
SMALL_VASE_CLAY = 1
SMALL_VASE_GLAZE = 1
LARGE_VASE_CLAY = 4
LARGE_VASE_GLAZE = 2

# Profit per vase.
SMALL_VASE_PROFIT = 3
LARGE_VASE_PROFIT = 9


@dataclasses.dataclass(frozen=True)
class ProductionTarget:
    """Number of vases of each size to produce.

    Attributes:
      small: Number of small vases, a non-negative integer.
      large: Number of large vases, a non-negative integer.
    """

    small: int = 0
    large: int = 0

    def profit(self) -> int:
        """Returns the profit made by selling every vase of the target."""
        return SMALL_VASE_PROFIT * self.small + LARGE_VASE_PROFIT * self.large


@dataclasses.dataclass(frozen=True)
class ResourceSupply:
    """Raw resources available to the shop.

    Attributes:
      clay: Units of clay available, non-negative.
      glaze: Units of glaze available, non-negative.
    """

    clay: float = 0.0
    glaze: float = 0.0

    def natural_bounds(self) -> Tuple[int, int]:
        """Returns the greatest number of small and large vases, taken alone.

        Each bound is obtained by spending a whole resource on one vase size and
        is floored to an integer. The same bounds must be used for the variable
        domains and for the enumeration ranges.
        """
        max_small = min(
            self.clay / SMALL_VASE_CLAY, self.glaze / SMALL_VASE_GLAZE
        )
        max_large = min(
            self.clay / LARGE_VASE_CLAY, self.glaze / LARGE_VASE_GLAZE
        )
        return math.floor(max_small), math.floor(max_large)

    def covers(self, target: ProductionTarget) -> bool:
        """Returns true if `target` can be produced with this supply."""
        clay = SMALL_VASE_CLAY * target.small + LARGE_VASE_CLAY * target.large
        glaze = SMALL_VASE_GLAZE * target.small + LARGE_VASE_GLAZE * target.large
        return clay <= self.clay and glaze <= self.glaze
