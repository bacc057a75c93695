from unittest import TestCase, main
from devfolio.utils.form_coercion import (
    blank_to_none,
    clamp_skill_level,
    form_text,
    join_comma_list,
    normalize_date_text,
    parse_comma_list,
)


class TestFormCoercion(TestCase):
    def test_parse_comma_list_trims_and_drops_empty_items(self):
        self.assertEqual(
            parse_comma_list("Flutter, Dart,  Firebase"),
            ["Flutter", "Dart", "Firebase"],
        )
        self.assertEqual(parse_comma_list("a,,b, ,"), ["a", "b"])

    def test_parse_comma_list_empty_is_none(self):
        self.assertIsNone(parse_comma_list(""))
        self.assertIsNone(parse_comma_list(" , ,"))
        self.assertIsNone(parse_comma_list(None))
        self.assertIsNone(parse_comma_list([]))

    def test_parse_comma_list_accepts_lists(self):
        self.assertEqual(parse_comma_list([" Go ", "", None, "Rust"]), ["Go", "Rust"])

    def test_parse_comma_list_rejects_other_types(self):
        with self.assertRaises(ValueError):
            parse_comma_list(42)

    def test_comma_list_round_trip(self):
        items = parse_comma_list("Flutter, Dart,  Firebase")

        self.assertEqual(items, ["Flutter", "Dart", "Firebase"])
        self.assertEqual(join_comma_list(items), "Flutter, Dart, Firebase")
        self.assertEqual(parse_comma_list(join_comma_list(items)), items)

    def test_join_comma_list(self):
        self.assertEqual(join_comma_list(["Dean's List", "Honors"]), "Dean's List, Honors")
        self.assertEqual(join_comma_list(None), "")
        self.assertEqual(join_comma_list([]), "")

    def test_blank_to_none(self):
        self.assertIsNone(blank_to_none("   "))
        self.assertIsNone(blank_to_none(None))
        self.assertEqual(blank_to_none("  3.8 "), "3.8")
        self.assertEqual(blank_to_none(0), 0)

    def test_clamp_skill_level(self):
        self.assertEqual(clamp_skill_level(None), 1)
        self.assertEqual(clamp_skill_level(""), 1)
        self.assertEqual(clamp_skill_level("4"), 4)
        self.assertEqual(clamp_skill_level(0), 1)
        self.assertEqual(clamp_skill_level(9), 5)

    def test_clamp_skill_level_rejects_non_integers(self):
        with self.assertRaises(ValueError):
            clamp_skill_level("expert")
        with self.assertRaises(ValueError):
            clamp_skill_level(True)

    def test_normalize_date_text(self):
        self.assertEqual(normalize_date_text("2020-01-15"), "2020-01-15")
        self.assertEqual(normalize_date_text(" 2020-01 "), "2020-01")
        self.assertIsNone(normalize_date_text(""))

    def test_normalize_date_text_rejects_invalid_dates(self):
        with self.assertRaises(ValueError):
            normalize_date_text("2020-13-01")
        with self.assertRaises(ValueError):
            normalize_date_text("last spring")

    def test_form_text(self):
        self.assertEqual(form_text(None), "")
        self.assertEqual(form_text(3), "3")


if __name__ == "__main__":
    main()
