from __future__ import annotations

import unittest

from jinja2 import Environment

from regex_replace import InvalidPatternError
from regex_replace.filters import FILTERS, register_filters


class FilterRegistrationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.env = register_filters(Environment())

    def test_registers_both_filters(self) -> None:
        self.assertIs(self.env.filters["regex_replace"], FILTERS["regex_replace"])
        self.assertIs(self.env.filters["regex_replace_once"], FILTERS["regex_replace_once"])

    def test_prefix_is_applied(self) -> None:
        env = register_filters(Environment(), prefix="re_")

        self.assertIn("re_regex_replace", env.filters)
        self.assertNotIn("regex_replace", env.filters)

    def test_regex_replace_in_template(self) -> None:
        template = self.env.from_string("{{ name | regex_replace(pattern, repl) }}")

        rendered = template.render(name="John Smith", pattern=r"(\w+) (\w+)", repl=r"\2 \1")

        self.assertEqual(rendered, "Smith John")

    def test_regex_replace_once_in_template(self) -> None:
        template = self.env.from_string("{{ text | regex_replace_once('-', '+') }}")

        self.assertEqual(template.render(text="a-b-c"), "a+b-c")

    def test_invalid_pattern_fails_render(self) -> None:
        template = self.env.from_string("{{ text | regex_replace('(', 'x') }}")

        with self.assertRaises(InvalidPatternError):
            template.render(text="abc")


if __name__ == "__main__":
    unittest.main()
