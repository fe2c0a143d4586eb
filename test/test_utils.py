import math
import unittest
import warnings

import numpy as np

from pynmath import cospi, sinpi, tanpi, logspace_add, logspace_sub, NMathWarning, MathError
from pynmath.utils import chebyshev_eval, chebyshev_init
from pynmath.utils.constants import Rf_d1mach, Rf_i1mach, DBL_EPSILON, DBL_MIN, DBL_MAX
from pynmath.utils.diagnostics import ML_WARNING, ML_WARN_return_NAN
from pynmath.utils.ieee import ieee754


class ChebyshevTest(unittest.TestCase):
    def test_init(self):
        self.assertEqual(chebyshev_init([1., 2., 3.], 3, 0.5), 2)
        self.assertEqual(chebyshev_init([], 0, 0.5), 0)
        self.assertEqual(chebyshev_init([1., 2., 3.], 3, -0.5), 2)
        self.assertEqual(chebyshev_init([1., 1e-10, 1e-12], 3, 1e-9), 0)

    def test_eval(self):
        self.assertAlmostEqual(chebyshev_eval(0.6, [1., 2., 3.], 2), 1.7, delta=1e-15)
        # T0 + T1(x) + T2(x) with the halved leading coefficient convention
        x = 0.3
        expected = 0.5 * 2. + x + (2 * x * x - 1)
        self.assertAlmostEqual(chebyshev_eval(x, [2., 1., 1.], 3), expected, delta=1e-15)

    def test_eval_out_of_range(self):
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(chebyshev_eval(0.6, [1., 2., 3.], 0)))
        with self.assertWarns(NMathWarning):
            self.assertTrue(math.isnan(chebyshev_eval(2., [1., 2., 3.], 2)))


class TrigPiTest(unittest.TestCase):
    def test_exact_points(self):
        self.assertEqual(cospi(0.), 1.)
        self.assertEqual(cospi(0.5), 0.)
        self.assertEqual(cospi(1.), -1.)
        self.assertEqual(cospi(-3.5), 0.)
        self.assertEqual(sinpi(0.), 0.)
        self.assertEqual(sinpi(1.), 0.)
        self.assertEqual(sinpi(0.5), 1.)
        self.assertEqual(sinpi(-0.5), -1.)
        self.assertEqual(sinpi(4.5), 1.)
        self.assertEqual(tanpi(0.), 0.)
        self.assertEqual(tanpi(0.25), 1.)
        self.assertEqual(tanpi(-0.25), -1.)
        self.assertTrue(math.isnan(tanpi(0.5)))

    def test_general(self):
        self.assertAlmostEqual(cospi(0.234), math.cos(math.pi * 0.234), delta=1e-15)
        self.assertAlmostEqual(sinpi(0.234), math.sin(math.pi * 0.234), delta=1e-15)
        self.assertAlmostEqual(tanpi(0.234), math.tan(math.pi * 0.234), delta=1e-15)
        self.assertAlmostEqual(sinpi(2.25), math.sqrt(0.5), delta=1e-15)

    def test_non_finite(self):
        self.assertTrue(math.isnan(cospi(float("nan"))))
        for f in (cospi, sinpi, tanpi):
            with self.assertWarns(NMathWarning):
                self.assertTrue(math.isnan(f(float("inf"))))


class LogspaceTest(unittest.TestCase):
    def test_add(self):
        self.assertAlmostEqual(logspace_add(math.log(2.), math.log(3.)), math.log(5.), delta=1e-15)
        self.assertEqual(logspace_add(-1000., float("-inf")), -1000.)
        self.assertAlmostEqual(logspace_add(-1000., -1000.), -1000. + math.log(2.), delta=1e-12)

    def test_sub(self):
        self.assertAlmostEqual(logspace_sub(math.log(5.), math.log(3.)), math.log(2.), delta=1e-15)
        self.assertEqual(logspace_sub(0., 0.), float("-inf"))


class MachineConstantsTest(unittest.TestCase):
    def test_d1mach(self):
        self.assertEqual(Rf_d1mach(1), DBL_MIN)
        self.assertEqual(Rf_d1mach(2), DBL_MAX)
        self.assertEqual(Rf_d1mach(3), DBL_EPSILON / 2)
        self.assertEqual(Rf_d1mach(4), DBL_EPSILON)
        self.assertAlmostEqual(Rf_d1mach(5), math.log10(2.), delta=1e-16)
        self.assertEqual(Rf_d1mach(99), 0.)

    def test_i1mach(self):
        self.assertEqual(Rf_i1mach(14), 53)
        self.assertEqual(Rf_i1mach(15), -1021)
        self.assertEqual(Rf_i1mach(16), 1024)
        self.assertEqual(Rf_i1mach(10), 2)
        self.assertEqual(Rf_i1mach(0), 0)
        self.assertEqual(DBL_EPSILON, np.finfo(float).eps)


class DiagnosticsTest(unittest.TestCase):
    def test_warning_messages(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            ML_WARNING(MathError.NOCONV, "somewhere")
            ML_WARNING(MathError.NONE, "nowhere")
            value = ML_WARN_return_NAN("elsewhere")
        self.assertTrue(math.isnan(value))
        self.assertEqual(len(caught), 2)
        self.assertTrue(all(issubclass(w.category, NMathWarning) for w in caught))
        self.assertIn("somewhere", str(caught[0].message))
        self.assertIn("elsewhere", str(caught[1].message))

    def test_warnings_can_be_silenced(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("ignore", NMathWarning)
            ML_WARN_return_NAN("quiet")
        self.assertEqual(len(caught), 0)


class Ieee754Test(unittest.TestCase):
    def test_c_double_semantics(self):
        @ieee754(2)
        def ratio(a, b):
            return a / b

        self.assertEqual(ratio(1, 0), float("inf"))
        self.assertEqual(ratio(-1., 0.), float("-inf"))
        self.assertTrue(math.isnan(ratio(0, 0)))
        self.assertIsInstance(ratio(1, 2), np.float64)

    def test_trailing_arguments_untouched(self):
        @ieee754(1)
        def passthrough(x, flag=False):
            return flag

        self.assertIs(passthrough(1, True), True)
        self.assertIs(passthrough(1, flag=False), False)


if __name__ == "__main__":
    unittest.main()
