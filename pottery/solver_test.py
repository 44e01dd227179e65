#!/usr/bin/env python3
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

from absl.testing import absltest

from pottery import errors
from pottery import solver


class CreateSessionTest(absltest.TestCase):

    def test_default_backend(self) -> None:
        session = solver.create_session()
        self.assertFalse(session.closed)
        self.assertEqual(session.solver.NumVariables(), 0)
        session.close()
        self.assertTrue(session.closed)

    def test_unknown_backend(self) -> None:
        with self.assertRaises(errors.ConfigurationError):
            solver.create_session("NOT_A_SOLVER")

    def test_continuous_backend_rejected(self) -> None:
        with self.assertRaisesRegex(
            errors.ConfigurationError, "does not handle integer variables"
        ):
            solver.create_session("GLOP")

    def test_configuration_error_is_pottery_error(self) -> None:
        with self.assertRaises(errors.PotteryError):
            solver.create_session("NOT_A_SOLVER")

    def test_closed_session_is_unusable(self) -> None:
        session = solver.create_session()
        session.close()
        session.close()
        with self.assertRaises(ValueError):
            session.make_int_var(0, 1, "x")


class OpenSessionTest(absltest.TestCase):

    def test_closed_on_exit(self) -> None:
        with solver.open_session() as session:
            self.assertFalse(session.closed)
        self.assertTrue(session.closed)

    def test_closed_on_error(self) -> None:
        with self.assertRaisesRegex(KeyError, "boom"):
            with solver.open_session() as session:
                raise KeyError("boom")
        self.assertTrue(session.closed)

    def test_unknown_backend(self) -> None:
        with self.assertRaises(errors.ConfigurationError):
            with solver.open_session("NOT_A_SOLVER"):
                self.fail("session should not be opened")


class LinearSolverSessionTest(absltest.TestCase):

    def test_integer_program(self) -> None:
        with solver.open_session() as session:
            # maximize x + 10 * y s.t. x + 7 * y <= 17.5, x <= 3.5.
            x = session.make_int_var(0, 100, "x")
            y = session.make_int_var(0, 100, "y")
            c0 = session.make_constraint(0.0, 17.5, "c0")
            session.set_coefficient(c0, x, 1)
            session.set_coefficient(c0, y, 7)
            c1 = session.make_constraint(0.0, 3.5, "c1")
            session.set_coefficient(c1, x, 1)
            session.set_objective_coefficient(x, 1)
            session.set_objective_coefficient(y, 10)
            session.set_objective_direction(maximize=True)

            self.assertEqual(session.solve(), solver.SolveStatus.OPTIMAL)
            self.assertAlmostEqual(session.solution_value(x), 3.0)
            self.assertAlmostEqual(session.solution_value(y), 2.0)

    def test_minimization(self) -> None:
        with solver.open_session() as session:
            x = session.make_int_var(0, 10, "x")
            c = session.make_constraint(2.5, 10, "c")
            session.set_coefficient(c, x, 1)
            session.set_objective_coefficient(x, 1)
            session.set_objective_direction(maximize=False)

            self.assertEqual(session.solve(), solver.SolveStatus.OPTIMAL)
            self.assertAlmostEqual(session.solution_value(x), 3.0)

    def test_set_bounds_makes_model_infeasible(self) -> None:
        with solver.open_session() as session:
            x = session.make_int_var(0, 5, "x")
            c = session.make_constraint(0, 5, "c")
            session.set_coefficient(c, x, 1)
            self.assertEqual(session.solve(), solver.SolveStatus.OPTIMAL)

            session.set_bounds(c, 2, 5)
            session.set_bounds(x, 0, 1)
            self.assertEqual(session.solve(), solver.SolveStatus.INFEASIBLE)

            session.set_bounds(x, 0, 5)
            self.assertEqual(session.solve(), solver.SolveStatus.OPTIMAL)

    def test_enable_output(self) -> None:
        with solver.open_session() as session:
            session.enable_output()
            session.make_int_var(0, 1, "x")
            self.assertEqual(session.solve(), solver.SolveStatus.OPTIMAL)


if __name__ == "__main__":
    absltest.main()
