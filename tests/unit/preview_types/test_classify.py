"""Tests for extension extraction and preview classification."""

from __future__ import annotations

import unittest

from driveview.preview_types import EXTENSIONS, PreviewCategory, classify, file_is_image, get_extension


class ExtensionTests(unittest.TestCase):
    def test_get_extension_uses_text_after_last_dot(self) -> None:
        self.assertEqual(get_extension("archive.tar.gz"), "gz")
        self.assertEqual(get_extension("Photo.JPG"), "jpg")
        self.assertEqual(get_extension(".bashrc"), "bashrc")

    def test_get_extension_is_empty_without_usable_dot(self) -> None:
        self.assertEqual(get_extension("Makefile"), "")
        self.assertEqual(get_extension("trailing."), "")
        self.assertEqual(get_extension(""), "")


class ClassifyTests(unittest.TestCase):
    def test_classification_is_case_insensitive(self) -> None:
        self.assertIs(classify("Photo.JPG"), classify("photo.jpg"))
        self.assertIs(classify("Photo.JPG"), PreviewCategory.IMAGE)

    def test_known_categories(self) -> None:
        cases = {
            "notes.txt": PreviewCategory.TEXT,
            "main.py": PreviewCategory.CODE,
            "README.md": PreviewCategory.MARKDOWN,
            "clip.mp4": PreviewCategory.VIDEO,
            "song.flac": PreviewCategory.AUDIO,
            "report.pdf": PreviewCategory.PDF,
            "budget.xlsx": PreviewCategory.OFFICE,
        }
        for name, expected in cases.items():
            with self.subTest(name=name):
                self.assertIs(classify(name), expected)

    def test_unknown_or_missing_extension_is_none(self) -> None:
        self.assertIs(classify("backup.zip"), PreviewCategory.NONE)
        self.assertIs(classify("LICENSE"), PreviewCategory.NONE)

    def test_file_is_image(self) -> None:
        self.assertTrue(file_is_image("a.PNG"))
        self.assertFalse(file_is_image("a.pdf"))

    def test_table_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            EXTENSIONS["zip"] = PreviewCategory.CODE  # type: ignore[index]


if __name__ == "__main__":
    unittest.main()
