"""Tests for slug normalization, transliteration and unique suffixing."""

import re
import unittest
from unittest.mock import patch

from poetsite.models import BlogPost
from poetsite.services.slug import (
    MAX_SLUG_LENGTH,
    generate_slug,
    transliterate,
    transliterate_slug,
    unique_slug,
)
from support import make_session_factory, make_user


class TestGenerateSlug(unittest.TestCase):
    def test_latin_title(self) -> None:
        self.assertEqual(generate_slug("  Hello,   World!  "), "hello-world")

    def test_keeps_bengali_letters(self) -> None:
        self.assertEqual(generate_slug("আমার সোনার বাংলা"), "আমার-সোনার-বাংলা")

    def test_hyphen_runs_collapse_and_trim(self) -> None:
        self.assertEqual(generate_slug("--a -- b--"), "a-b")

    def test_idempotent(self) -> None:
        for title in ("Hello World", "আমার সোনার বাংলা", "x_y z!!"):
            slug = generate_slug(title)
            self.assertEqual(generate_slug(slug), slug)

    def test_output_alphabet(self) -> None:
        slug = generate_slug("Ünïcödé & <tags> 123 কবিতা")
        self.assertTrue(re.fullmatch(r"[ঀ-৿a-z0-9-]+", slug), slug)
        self.assertFalse(slug.startswith("-") or slug.endswith("-"))

    def test_truncated(self) -> None:
        self.assertLessEqual(len(generate_slug("a" * 500)), MAX_SLUG_LENGTH)

    def test_empty_title_falls_back(self) -> None:
        slug = generate_slug("!!!", prefix="post")
        self.assertRegex(slug, r"^post-\d+$")

    def test_prefix_is_used(self) -> None:
        self.assertRegex(generate_slug("", prefix="poem"), r"^poem-\d+$")

    def test_fallback_differs_over_time(self) -> None:
        with patch("poetsite.services.slug.time") as clock:
            clock.time_ns.side_effect = [1_700_000_000_000_000_000, 1_700_000_000_005_000_000]
            first = generate_slug("!!!")
            second = generate_slug("!!!")
        self.assertEqual(first, "post-1700000000000")
        self.assertEqual(second, "post-1700000000005")
        self.assertNotEqual(first, second)


class TestTransliterate(unittest.TestCase):
    def test_inherent_vowel(self) -> None:
        self.assertEqual(transliterate("আমার সোনার বাংলা"), "amaro sonaro bangla")
        self.assertEqual(transliterate("কবিতা"), "kobita")
        self.assertEqual(transliterate("গান"), "gano")

    def test_virama_joins_conjunct(self) -> None:
        self.assertEqual(transliterate("বন্ধু"), "bondhu")

    def test_non_consonant_marks_take_no_vowel(self) -> None:
        self.assertEqual(transliterate("সৎ"), "sot")
        self.assertEqual(transliterate("রং"), "rong")

    def test_nukta_letters(self) -> None:
        self.assertEqual(transliterate("বাড়ি"), "bari")
        self.assertEqual(transliterate("ড়"), "ro")
        self.assertEqual(transliterate("য়"), "yo")

    def test_digits(self) -> None:
        self.assertEqual(transliterate("১৯৭১"), "1971")

    def test_slug_is_latin_only(self) -> None:
        self.assertEqual(transliterate_slug("আমার সোনার বাংলা"), "amaro-sonaro-bangla")
        self.assertEqual(transliterate_slug("কবিতা"), "kobita")

    def test_slug_fallback(self) -> None:
        self.assertRegex(transliterate_slug("???", prefix="poem"), r"^poem-\d+$")


class TestUniqueSlug(unittest.TestCase):
    """Checked against a real table: base, then base-1, base-2, ..."""

    def setUp(self) -> None:
        self.db = make_session_factory()()
        self.author = make_user(self.db, "author@example.com", password=None)

    def tearDown(self) -> None:
        self.db.close()

    def _post(self, slug: str) -> BlogPost:
        post = BlogPost(title=slug, slug=slug, content="x", author_id=self.author.id)
        self.db.add(post)
        self.db.commit()
        return post

    def test_free_base_is_returned(self) -> None:
        self.assertEqual(unique_slug(self.db, BlogPost, "hello"), "hello")

    def test_suffixes_in_order(self) -> None:
        self._post("hello")
        self.assertEqual(unique_slug(self.db, BlogPost, "hello"), "hello-1")
        self._post("hello-1")
        self.assertEqual(unique_slug(self.db, BlogPost, "hello"), "hello-2")

    def test_exclude_own_row(self) -> None:
        post = self._post("hello")
        self.assertEqual(unique_slug(self.db, BlogPost, "hello", exclude_id=post.id), "hello")


if __name__ == "__main__":
    unittest.main()
