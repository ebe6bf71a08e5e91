import unittest

from signedint import I0, I1, I8, I96, I128, I160, I192, I256


WIDTHS = (I96, I128, I160, I192, I256)


class TestArithmeticShiftRight(unittest.TestCase):

    def test_asr(self):
        for cls in WIDTHS:
            with self.subTest(cls=cls.__name__):
                word = cls.Word
                exp = cls.BITS - 2
                shift = cls.BITS - 3
                # 1100...0000
                value = -cls.from_raw(word(2) ** exp)

                self.assertEqual(value.asr(shift), cls.from_raw(word.MAX - 1))
                self.assertEqual(cls.MINUS_ONE.asr(250), cls.MINUS_ONE)
                self.assertEqual(value.asr(cls.BITS - 1), cls.MINUS_ONE)
                self.assertEqual(value.asr(1024), cls.MINUS_ONE)
                self.assertEqual(cls(1024).asr(5), cls(32))
                self.assertEqual(cls(-1024).asr(5), cls(-32))
                self.assertEqual(cls(-5).asr(1), cls(-3))
                self.assertEqual(cls.MAX.asr(255), cls.ZERO)
                self.assertEqual(value.asr(0), value)

    def test_small_widths(self):
        z, o, m = I0.ZERO, I1.ZERO, I1.MINUS_ONE
        self.assertEqual(z.asr(1), z)
        self.assertEqual(o.asr(1), o)
        self.assertEqual(m.asr(1), m)
        self.assertEqual(m.asr(1000), m)

    def test_negative_amount(self):
        with self.assertRaises(ValueError):
            I256.ONE.asr(-1)


class TestArithmeticShiftLeft(unittest.TestCase):

    def test_asl(self):
        for cls in WIDTHS:
            with self.subTest(cls=cls.__name__):
                word = cls.Word
                self.assertEqual(cls.MINUS_ONE.asl(0), cls.MINUS_ONE)
                # Would be 0000...0000
                self.assertIsNone(cls.MINUS_ONE.asl(256))
                self.assertEqual(cls.MINUS_ONE.asl(cls.BITS - 1),
                                 cls.from_raw(word(2) ** (cls.BITS - 1)))
                self.assertEqual(cls(-1024).asl(5), cls(-32768))
                self.assertEqual(cls(1024).asl(5), cls(32768))
                # Would be 1000...0000
                self.assertIsNone(cls(1024).asl(cls.BITS - 11))
                self.assertEqual(cls.ZERO.asl(1024), cls.ZERO)

    def test_small_widths(self):
        z, o, m = I0.ZERO, I1.ZERO, I1.MINUS_ONE
        self.assertEqual(z.asl(1), z)
        self.assertEqual(o.asl(1), o)
        self.assertIsNone(m.asl(1))

    def test_inverse_of_asr(self):
        for value in (I256(-7), I256(7), I256(1 << 100), I256(-(1 << 100))):
            with self.subTest(value=value):
                self.assertEqual(value.asl(20).asr(20), value)


class TestLogicalShifts(unittest.TestCase):

    def test_operators(self):
        for cls in WIDTHS:
            with self.subTest(cls=cls.__name__):
                self.assertEqual(cls.ONE << cls.BITS - 1, cls.MIN)
                self.assertEqual(cls.MIN >> cls.BITS - 1, cls.ONE)
                self.assertEqual(cls.MINUS_ONE >> 1, cls.MAX)
                self.assertEqual(cls.ONE << cls.BITS, cls.ZERO)
                self.assertEqual(cls.MINUS_ONE >> 1000, cls.ZERO)

    def test_overflow_flag(self):
        for cls in WIDTHS:
            with self.subTest(cls=cls.__name__):
                self.assertEqual(cls.MIN.overflowing_shl(1), (cls.ZERO, True))
                self.assertEqual(cls.MINUS_ONE.overflowing_shr(1), (cls.MAX, True))
                self.assertEqual(cls(4).overflowing_shr(2), (cls.ONE, False))
                self.assertEqual(cls.ZERO.overflowing_shl(cls.BITS), (cls.ZERO, False))
                self.assertIsNone(cls.ONE.checked_shr(1))
                self.assertEqual(cls(4).checked_shr(2), cls.ONE)
                self.assertIsNone(cls.MAX.checked_shl(2))
                self.assertEqual(cls.MAX.wrapping_shl(1), cls(-2))
                # Zero fill changes the value of a negative number
                self.assertEqual(cls(-2).overflowing_shr(1), (cls.MAX, True))
                self.assertIsNone(cls(-2).checked_shr(1))
                self.assertEqual(cls(-2).overflowing_shr(0), (cls(-2), False))
                self.assertIsNone(cls.MIN.checked_shr(cls.BITS - 1))

    def test_checked_shr_keeps_sign(self):
        self.assertIsNone(I8(-2).checked_shr(1))
        self.assertEqual(I8(-2).wrapping_shr(1), I8(127))
        self.assertEqual(I8(2).checked_shr(1), I8(1))

    def test_negative_amount(self):
        with self.assertRaises(ValueError):
            I256.ONE << -1
        with self.assertRaises(ValueError):
            I256.ONE.overflowing_shr(-1)


class TestBitwise(unittest.TestCase):

    def test_operators(self):
        self.assertEqual(I256(-1) & 0xff, I256(255))
        self.assertEqual(I256(0xf0) | I256(0x0f), I256(0xff))
        self.assertEqual(I256(5) ^ I256(-1), I256(-6))
        self.assertEqual(~I256.ZERO, I256.MINUS_ONE)
        self.assertEqual(~I256.MAX, I256.MIN)
        self.assertEqual(0xff & I256(-1), I256(255))


if __name__ == "__main__":
    unittest.main()
