import unittest
from unittest.mock import patch

import date_expand
from date_expand import expand
from exceptions import UnterminatedDateIntroducer, UnterminatedFormat


def fake_clock(fmt):
    return f"<{fmt}>"


class TestExpand(unittest.TestCase):
    def test_plain_text_passes_through(self):
        self.assertEqual("rush$ ", expand("rush$ ", strftime=fake_clock))

    def test_date_token_uses_clock(self):
        self.assertEqual("at <%H:%M> now", expand("at %D{%H:%M} now", strftime=fake_clock))

    def test_multiple_tokens(self):
        self.assertEqual("<a>-<b>", expand("%D{a}-%D{b}", strftime=fake_clock))

    def test_empty_format(self):
        self.assertEqual("<>", expand("%D{}", strftime=fake_clock))

    def test_other_placeholders_are_left_alone(self):
        self.assertEqual("%u@%h \\n", expand("%u@%h \\n", strftime=fake_clock))

    def test_escaped_percent_is_not_a_date_token(self):
        self.assertEqual("%%D{x}", expand("%%D{x}", strftime=fake_clock))

    def test_escaped_percent_then_real_token(self):
        self.assertEqual("%%<x>", expand("%%%D{x}", strftime=fake_clock))

    def test_trailing_percent_is_kept(self):
        self.assertEqual("50%", expand("50%", strftime=fake_clock))

    def test_default_clock(self):
        with patch.object(date_expand, "local_strftime", return_value="2024") as clock:
            self.assertEqual("y=2024", expand("y=%D{%Y}"))
        clock.assert_called_once_with("%Y")

    def test_clock_failure_uses_fallback(self):
        def broken(fmt):
            raise ValueError("bad format")
        self.assertEqual("[???]", expand("[%D{%Q}]", strftime=broken))


class TestExpandErrors(unittest.TestCase):
    def test_introducer_without_brace(self):
        with self.assertRaises(UnterminatedDateIntroducer):
            expand("%Dx", strftime=fake_clock)

    def test_introducer_at_end(self):
        with self.assertRaises(UnterminatedDateIntroducer):
            expand("time %D", strftime=fake_clock)

    def test_unclosed_format(self):
        with self.assertRaises(UnterminatedFormat) as cm:
            expand("%D{%H:%M", strftime=fake_clock)
        self.assertEqual("%H:%M", cm.exception.fmt)
        self.assertTrue(str(cm.exception).startswith("%D:"))


if __name__ == "__main__":
    unittest.main()
