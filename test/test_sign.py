import unittest

from signedint import Sign


class TestSign(unittest.TestCase):

    def test_from_bool(self):
        self.assertIs(Sign.from_bool(True), Sign.NEGATIVE)
        self.assertIs(Sign.from_bool(False), Sign.POSITIVE)

    def test_predicates(self):
        self.assertTrue(Sign.POSITIVE.is_positive())
        self.assertFalse(Sign.POSITIVE.is_negative())
        self.assertTrue(Sign.NEGATIVE.is_negative())
        self.assertFalse(Sign.NEGATIVE.is_positive())

    def test_multiplication(self):
        self.assertIs(Sign.POSITIVE * Sign.POSITIVE, Sign.POSITIVE)
        self.assertIs(Sign.POSITIVE * Sign.NEGATIVE, Sign.NEGATIVE)
        self.assertIs(Sign.NEGATIVE * Sign.POSITIVE, Sign.NEGATIVE)
        self.assertIs(Sign.NEGATIVE * Sign.NEGATIVE, Sign.POSITIVE)
        with self.assertRaises(TypeError):
            Sign.NEGATIVE * -1

    def test_negation(self):
        self.assertIs(-Sign.POSITIVE, Sign.NEGATIVE)
        self.assertIs(-Sign.NEGATIVE, Sign.POSITIVE)

    def test_int(self):
        self.assertEqual(int(Sign.POSITIVE), 1)
        self.assertEqual(int(Sign.NEGATIVE), -1)

    def test_display(self):
        self.assertEqual(str(Sign.POSITIVE), "")
        self.assertEqual(str(Sign.NEGATIVE), "-")
        self.assertEqual(format(Sign.POSITIVE, "+"), "+")
        self.assertEqual(format(Sign.NEGATIVE, "+"), "-")
        self.assertEqual("{}".format(Sign.POSITIVE), "")
        with self.assertRaises(ValueError):
            format(Sign.NEGATIVE, "x")


if __name__ == "__main__":
    unittest.main()
