import unittest

from error_correction import ErrorCorrection


class TestErrorCorrectionMethods(unittest.TestCase):
    def test_protection_order(self):
        self.assertEqual(
            [ErrorCorrection.LOW, ErrorCorrection.MEDIUM, ErrorCorrection.QUARTILE, ErrorCorrection.HIGH],
            list(ErrorCorrection),
        )
        self.assertEqual([0, 1, 2, 3], [level.ordinal for level in ErrorCorrection])

    def test_format_bits(self):
        self.assertEqual(ErrorCorrection.LOW, ErrorCorrection(0b01))
        self.assertEqual(ErrorCorrection.MEDIUM, ErrorCorrection(0b00))
        self.assertEqual(ErrorCorrection.QUARTILE, ErrorCorrection(0b11))
        self.assertEqual(ErrorCorrection.HIGH, ErrorCorrection(0b10))
        self.assertRaises(ValueError, lambda: ErrorCorrection(0b100))

    def test_from_letter(self):
        self.assertEqual(ErrorCorrection.LOW, ErrorCorrection.from_letter("L"))
        self.assertEqual(ErrorCorrection.QUARTILE, ErrorCorrection.from_letter("q"))
        self.assertEqual("H", ErrorCorrection.HIGH.letter)
        self.assertRaises(ValueError, lambda: ErrorCorrection.from_letter("X"))
        self.assertRaises(ValueError, lambda: ErrorCorrection.from_letter(""))
