import unittest
from unittest import mock

from sympy import isprime

from threshold_elgamal import (
    GroupParameters,
    InvalidParameters,
    ParameterGenerationExhausted,
    RandomnessUnavailable,
    setup,
)
from threshold_elgamal.params import sample_generator


class TestSetup(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.params = setup(16)

    def test_safe_prime(self):
        p, q = self.params.p, self.params.q
        self.assertTrue(isprime(p))
        self.assertTrue(isprime(q))
        self.assertEqual(q, (p - 1) // 2)
        self.assertEqual(p.bit_length(), 128)
        self.assertEqual(self.params.security_length_bytes, 16)

    def test_generator_spans_subgroup(self):
        p, q, g = self.params.p, self.params.q, self.params.g
        self.assertNotEqual(g, 1)
        self.assertEqual(pow(g, q, p), 1)
        self.assertGreaterEqual(g, 4)
        self.assertLess(g, q)

    def test_validate_accepts_generated(self):
        self.params.validate()

    def test_validate_rejects_tampering(self):
        p, q, g = self.params.p, self.params.q, self.params.g
        with self.assertRaises(InvalidParameters):
            GroupParameters(p, q, 1, 16).validate()
        with self.assertRaises(InvalidParameters):
            GroupParameters(p, q + 1, g, 16).validate()
        with self.assertRaises(InvalidParameters):
            # -1 is not a quadratic residue modulo a safe prime
            GroupParameters(p, q, p - 1, 16).validate()
        with self.assertRaises(InvalidParameters):
            GroupParameters(2 * 15 + 1, 15, 4, 1).validate()

    def test_contains(self):
        p, g = self.params.p, self.params.g
        self.assertTrue(self.params.contains(g))
        self.assertTrue(self.params.contains(1))
        self.assertFalse(self.params.contains(0))
        self.assertFalse(self.params.contains(p))
        self.assertFalse(self.params.contains(p - 1))

    def test_small_security_length(self):
        params = setup(2)
        params.validate()
        self.assertEqual(params.p.bit_length(), 16)

    def test_rejects_too_short(self):
        with self.assertRaises(ValueError):
            setup(1)
        with self.assertRaises(ValueError):
            setup(16, max_attempts=0)

    def test_prime_search_is_bounded(self):
        # (13 - 1) / 2 == 6 is never prime
        with mock.patch("threshold_elgamal.params.getPrime", return_value=13) as get_prime:
            with self.assertRaises(ParameterGenerationExhausted) as cm:
                setup(16, max_attempts=3)
        self.assertEqual(get_prime.call_count, 3)
        self.assertEqual(cm.exception.attempts, 3)

    def test_generator_search_is_bounded(self):
        with mock.patch("threshold_elgamal.params.random_bytes", return_value=b"\x01"):
            with self.assertRaises(ParameterGenerationExhausted):
                sample_generator(self.params.p, self.params.q, 1, max_attempts=5)

    def test_entropy_failure(self):
        with mock.patch("threshold_elgamal.utils.get_random_bytes", side_effect=OSError("no entropy")):
            with self.assertRaises(RandomnessUnavailable):
                setup(16)

    def test_short_entropy_read(self):
        with mock.patch("threshold_elgamal.utils.get_random_bytes", return_value=b""):
            with self.assertRaises(RandomnessUnavailable):
                setup(16)


if __name__ == "__main__":
    unittest.main()
