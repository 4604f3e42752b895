import unittest

from lexer import tokenize, join, has_unclosed_quote, split_error_message


class TestTokenize(unittest.TestCase):
    def test_simple_words(self):
        self.assertEqual(["set", "-x"], tokenize("set -x"))

    def test_quoted_words(self):
        self.assertEqual(["format", "a b", "c d"], tokenize("format \"a b\" 'c d'"))

    def test_blank_line(self):
        self.assertEqual([], tokenize(""))
        self.assertEqual([], tokenize("   \t "))

    def test_hash_is_not_a_comment(self):
        self.assertEqual(["format", "%#"], tokenize("format %#"))

    def test_backslash_escapes_in_unquoted_text(self):
        self.assertEqual(["format", "a\\tb"], tokenize("format 'a\\tb'"))
        self.assertEqual(["format", "atb"], tokenize("format a\\tb"))

    def test_unclosed_quote_raises(self):
        with self.assertRaises(ValueError):
            tokenize('echo "abc')

    def test_trailing_backslash_raises(self):
        with self.assertRaises(ValueError):
            tokenize("echo \\")


class TestJoin(unittest.TestCase):
    def test_requotes_arguments(self):
        self.assertEqual("format 'a b' plain", join(["format", "a b", "plain"]))

    def test_join_reads_back(self):
        argv = ["echo", "it's", "$HOME", ""]
        self.assertEqual(argv, tokenize(join(argv)))


class TestSplitErrors(unittest.TestCase):
    def test_odd_double_quotes(self):
        self.assertTrue(has_unclosed_quote('echo "abc'))

    def test_odd_single_quotes(self):
        self.assertTrue(has_unclosed_quote("echo it's"))

    def test_balanced_quotes(self):
        self.assertFalse(has_unclosed_quote("echo 'a' \"b\""))

    def test_unclosed_quote_message(self):
        self.assertEqual('unclosed quote: echo "abc', split_error_message('echo "abc'))

    def test_generic_message(self):
        self.assertEqual("invalid syntax; cannot split: echo \\", split_error_message("echo \\"))


if __name__ == "__main__":
    unittest.main()
