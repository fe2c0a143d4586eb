import math
import unittest

import numpy as np
from scipy import special

from pynmath import bd0, ebd0, stirlerr, log1pmx, NMathWarning


def close(actual, expected, rtol):
    return bool(np.isclose(actual, expected, rtol=rtol, atol=0))


class Bd0Test(unittest.TestCase):
    def test_far_from_mean(self):
        for x, M in ((5., 1.), (1., 5.), (100., 3.), (0.5, 40.)):
            self.assertTrue(close(bd0(x, M), x * math.log(x / M) + M - x, 1e-14), (x, M))

    def test_near_mean(self):
        # x log(x/M) + M - x  =  -x log1pmx((M - x)/x)
        for x, M in ((9., 8.9), (1000., 1001.), (1e6, 1e6 + 1.), (3.3, 3.1)):
            value = bd0(x, M)
            self.assertTrue(math.isfinite(value))
            self.assertTrue(value > 0.)
            self.assertTrue(close(value, -x * log1pmx((M - x) / x), 1e-13), (x, M))

    def test_equal(self):
        self.assertEqual(bd0(1., 1.), 0.)
        self.assertEqual(bd0(7.5, 7.5), 0.)

    def test_invalid(self):
        for x, M in ((1., 0.), (float("inf"), 1.), (1., float("inf"))):
            with self.assertWarns(NMathWarning):
                self.assertTrue(math.isnan(bd0(x, M)))


class Ebd0Test(unittest.TestCase):
    def test_special_cases(self):
        self.assertEqual(ebd0(1., 1.), (0., 0.))
        self.assertEqual(ebd0(0., 1.), (1., 0.))
        self.assertEqual(ebd0(1., 0.)[0], float("inf"))

    def test_nan_propagates(self):
        nan, inf = float("nan"), float("inf")
        for x, M in ((nan, 0.), (nan, 1.), (nan, 3.), (nan, inf), (1., nan),
                     (0., nan), (inf, nan), (-1., nan), (nan, nan)):
            yh, yl = ebd0(x, M)
            self.assertTrue(math.isnan(yh), (x, M))
            self.assertEqual(yl, 0., (x, M))

    def test_agrees_with_bd0(self):
        for x, M in ((3., .5), (10.2, 5.45), (9., 8.9), (1e3, 1.5e3), (2.5, 1e4)):
            yh, yl = ebd0(x, M)
            self.assertEqual(yh, math.floor(yh))
            self.assertTrue(close(yh + yl, bd0(x, M), 1e-13), (x, M))


class StirlerrTest(unittest.TestCase):
    def test_table(self):
        self.assertEqual(stirlerr(1.), 0.0810614667953272582196702)
        self.assertEqual(stirlerr(0.5), 0.1534264097200273452913848)

    def test_against_lgamma(self):
        for n in (0.3, 3.3, 14.2, 25., 50., 200.):
            expected = special.gammaln(n + 1) - (n + 0.5) * math.log(n) + n - 0.5 * math.log(2 * math.pi)
            self.assertTrue(close(stirlerr(n), expected, 1e-9), n)

    def test_large(self):
        n = 1000.
        self.assertTrue(close(stirlerr(n), 1 / (12 * n) - 1 / (360 * n ** 3), 1e-12))


if __name__ == "__main__":
    unittest.main()
