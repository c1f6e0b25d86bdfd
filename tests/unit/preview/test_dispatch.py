"""Tests for the preview dispatch state machine."""

from __future__ import annotations

import unittest

from driveview.preview import (
    AuthRequired,
    ErrorView,
    FolderView,
    ImageView,
    LoadingView,
    RendererRequest,
    UnavailableView,
    dispatch,
    renderer_payload,
    unavailable_message,
)
from driveview.preview_types import PreviewCategory
from driveview.store_model import DirectoryEntry, FetchError, FetchErrorKind, File, Folder, Loading


def file_state(name: str) -> File:
    return File(entry=DirectoryEntry(id="f", name=name, size=10, download_url=f"https://cdn.example.com/{name}"))


class DispatchStateTests(unittest.TestCase):
    def test_loading(self) -> None:
        self.assertEqual(dispatch(Loading(), "/"), LoadingView(text="Loading ..."))

    def test_unauthorized_routes_to_login_with_redirect(self) -> None:
        state = FetchError(FetchErrorKind.UNAUTHORIZED, "Request failed with status code 401")
        self.assertEqual(dispatch(state, "/private"), AuthRequired(redirect="/private"))

    def test_other_errors_keep_message_verbatim(self) -> None:
        state = FetchError(FetchErrorKind.OTHER, "Request failed with status code 404")
        self.assertEqual(dispatch(state, "/x"), ErrorView(message="Request failed with status code 404"))

    def test_folder_with_readme(self) -> None:
        readme = DirectoryEntry(id="r", name="README.md", download_url="u")
        folder = Folder(item=DirectoryEntry(id="d", name="docs", is_folder=True), children=(readme,))

        outcome = dispatch(folder, "/docs")

        self.assertIsInstance(outcome, FolderView)
        assert isinstance(outcome, FolderView)
        self.assertEqual(outcome.path, "/docs")
        self.assertEqual(
            outcome.readme,
            RendererRequest(category=PreviewCategory.MARKDOWN, file=readme, path="/docs", standalone=False),
        )

    def test_folder_without_readme(self) -> None:
        folder = Folder(item=DirectoryEntry(id="d", name="d", is_folder=True), children=())
        outcome = dispatch(folder, "/d")
        assert isinstance(outcome, FolderView)
        self.assertIsNone(outcome.readme)

    def test_unsupported_state_raises(self) -> None:
        with self.assertRaises(TypeError):
            dispatch(object(), "/")  # type: ignore[arg-type]


class DispatchFileTests(unittest.TestCase):
    def test_image_is_shown_inline(self) -> None:
        self.assertEqual(
            dispatch(file_state("cat.JPG"), "/cat.JPG"),
            ImageView(src="https://cdn.example.com/cat.JPG", alt="cat.JPG"),
        )

    def test_delegated_categories(self) -> None:
        cases = {
            "a.txt": PreviewCategory.TEXT,
            "a.rs": PreviewCategory.CODE,
            "a.mp4": PreviewCategory.VIDEO,
            "a.mp3": PreviewCategory.AUDIO,
            "a.pdf": PreviewCategory.PDF,
            "a.pptx": PreviewCategory.OFFICE,
        }
        for name, category in cases.items():
            with self.subTest(name=name):
                state = file_state(name)
                self.assertEqual(dispatch(state, "/" + name), RendererRequest(category=category, file=state.entry))

    def test_markdown_receives_current_path(self) -> None:
        state = file_state("guide.md")
        self.assertEqual(
            dispatch(state, "/docs/guide.md"),
            RendererRequest(category=PreviewCategory.MARKDOWN, file=state.entry, path="/docs/guide.md"),
        )

    def test_unrecognized_extension_falls_back_to_download(self) -> None:
        state = file_state("backup.zip")
        self.assertEqual(
            dispatch(state, "/backup.zip"),
            UnavailableView(
                message=unavailable_message("backup.zip"),
                download_url="https://cdn.example.com/backup.zip",
            ),
        )
        self.assertEqual(
            unavailable_message("backup.zip"),
            "Preview for file backup.zip is not available, download directly with the button below.",
        )


class RendererPayloadTests(unittest.TestCase):
    def test_payload_shapes(self) -> None:
        entry = DirectoryEntry(id="f", name="a.txt")
        self.assertEqual(renderer_payload(RendererRequest(PreviewCategory.TEXT, entry)), {"file": entry})
        markdown = RendererRequest(PreviewCategory.MARKDOWN, entry, path="/", standalone=False)
        self.assertEqual(renderer_payload(markdown), {"file": entry, "path": "/", "standalone": False})


if __name__ == "__main__":
    unittest.main()
