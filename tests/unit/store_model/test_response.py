"""Tests for turning raw store JSON into resource states."""

from __future__ import annotations

import unittest
from datetime import datetime, timezone

from driveview.store_model import (
    DOWNLOAD_URL_KEY,
    DirectoryEntry,
    FetchError,
    FetchErrorKind,
    File,
    Folder,
    parse_entry,
    parse_resource,
    safe_size,
)
from driveview.preview_types import PreviewCategory


class ParseEntryTests(unittest.TestCase):
    def test_file_entry_fields(self) -> None:
        entry = parse_entry(
            {
                "id": "01ABC",
                "name": "cat.png",
                "size": 2048,
                "lastModifiedDateTime": "2021-06-01T14:05:00Z",
                "file": {"mimeType": "image/png"},
                DOWNLOAD_URL_KEY: "https://cdn.example.com/cat.png",
            }
        )
        self.assertEqual(
            entry,
            DirectoryEntry(
                id="01ABC",
                name="cat.png",
                size=2048,
                last_modified=datetime(2021, 6, 1, 14, 5, tzinfo=timezone.utc),
                is_folder=False,
                download_url="https://cdn.example.com/cat.png",
            ),
        )

    def test_folder_entry_has_no_download_url(self) -> None:
        entry = parse_entry({"id": "f1", "name": "Docs", "folder": {"childCount": 3}, DOWNLOAD_URL_KEY: "x"})
        self.assertTrue(entry.is_folder)
        self.assertIsNone(entry.download_url)

    def test_malformed_fields_degrade_to_defaults(self) -> None:
        entry = parse_entry({"name": "broken.txt", "size": "lots", "lastModifiedDateTime": "never"}, position=4)
        self.assertEqual(entry.id, "#4")
        self.assertEqual(entry.size, 0)
        self.assertIsNone(entry.last_modified)

    def test_non_mapping_entry_becomes_placeholder(self) -> None:
        self.assertEqual(parse_entry(None, position=2), DirectoryEntry(id="#2", name=""))

    def test_safe_size(self) -> None:
        self.assertEqual(safe_size(10), 10)
        self.assertEqual(safe_size("12"), 12)
        self.assertEqual(safe_size(3.9), 3)
        self.assertEqual(safe_size(-5), 0)
        self.assertEqual(safe_size(True), 0)
        self.assertEqual(safe_size(float("nan")), 0)
        self.assertEqual(safe_size(None), 0)


class ParseResourceTests(unittest.TestCase):
    def test_folder_payload(self) -> None:
        state = parse_resource(
            {
                "id": "root",
                "name": "root",
                "folder": {"childCount": 2},
                "children": [
                    {"id": "a", "name": "a.txt", "size": 1, "file": {}},
                    "garbage",
                ],
            }
        )
        self.assertIsInstance(state, Folder)
        assert isinstance(state, Folder)
        self.assertEqual([child.name for child in state.children], ["a.txt", ""])

    def test_file_payload_derives_category(self) -> None:
        state = parse_resource({"id": "x", "name": "Report.PDF", "file": {}, DOWNLOAD_URL_KEY: "u"})
        self.assertIsInstance(state, File)
        assert isinstance(state, File)
        self.assertIs(state.category, PreviewCategory.PDF)

    def test_unknown_shape_is_error(self) -> None:
        state = parse_resource({"name": "package"})
        self.assertEqual(state, FetchError(FetchErrorKind.OTHER, "Cannot preview package."))

    def test_non_mapping_payload_is_error(self) -> None:
        state = parse_resource([1, 2])
        self.assertIsInstance(state, FetchError)


if __name__ == "__main__":
    unittest.main()
