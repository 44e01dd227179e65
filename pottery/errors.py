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

"""Errors raised by the pottery optimizer."""


class PotteryError(RuntimeError):
    """Base class of the errors raised while planning production."""


class ConfigurationError(PotteryError):
    """The requested solver backend could not be created.

    This is raised before any variable or constraint is added to a model. It is
    fatal to the call that triggered it.
    """


class OptimizationError(PotteryError):
    """The solver did not reach an optimal solution.

    No partial result is attached to the error.
    """
