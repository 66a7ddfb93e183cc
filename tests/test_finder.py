import unittest
from unittest.mock import patch

from paperfinder.auth import AuthInfo
from paperfinder.config import Settings
from paperfinder.errors import ConfigError, InvalidQueryError
from paperfinder.finder import PaperFinder
from paperfinder.models import RemoteFile
from paperfinder.naming import AUDIO_GROUP
from paperfinder.query import FullTextContains, NameContains
from paperfinder.util.mime import FOLDER_MIME, PDF_MIME

SCIENCES = "Group 4 - Sciences"


class FakeDriveClient:
    def __init__(self, files, contents=None) -> None:
        self.files = list(files)
        self.contents = dict(contents or {})
        self.calls = []
        self.closed = False

    def find(self, expr, *, parent_id=None, include_trashed=False):
        self.calls.append(("find", expr, parent_id))
        return [
            f for f in self.files
            if (parent_id is None or parent_id in f.parents)
            and (include_trashed or not f.trashed)
            and expr.matches(f)
        ]

    def get_file(self, file_id):
        self.calls.append(("get_file", file_id))
        for f in self.files:
            if f.file_id == file_id:
                return f
        return None

    def get_content(self, file_id):
        self.calls.append(("get_content", file_id))
        return self.contents.get(file_id)

    def close(self) -> None:
        self.closed = True


def _folder(file_id: str, name: str, parent: str) -> RemoteFile:
    return RemoteFile(file_id=file_id, name=name, mime_type=FOLDER_MIME, parents=(parent,))


def _file(file_id: str, name: str, parent: str, mime_type: str = PDF_MIME, **kwargs) -> RemoteFile:
    return RemoteFile(file_id=file_id, name=name, mime_type=mime_type, parents=(parent,), **kwargs)


def _archive():
    return [
        _folder("Y23", "2023", "ROOT"),
        _folder("Y22", "2022", "ROOT"),
        _folder("M23", "May", "Y23"),
        _folder("N23", "November", "Y23"),
        _folder("G4", SCIENCES, "M23"),
        _folder("GA", AUDIO_GROUP, "M23"),
        _file("b1", "Biology_paper_1_HL.pdf", "G4", view_link="https://drive.google.com/file/d/b1/view?usp=drivesdk"),
        _file("c2", "Chemistry_paper_2_SL.pdf", "G4"),
        _file("a1", "French_B_HL.mp3", "GA", "application/octet-stream"),
    ]


class TestPaperFinder(unittest.TestCase):
    def setUp(self) -> None:
        self.client = FakeDriveClient(_archive(), contents={"b1": b"%PDF-1.7", "a1": b"ID3"})
        self.finder = PaperFinder.from_client(self.client, "ROOT")

    def test_picker_options(self) -> None:
        self.assertEqual(self.finder.available_years(), [2023, 2022])
        self.assertEqual(self.finder.available_months("2023"), ["May", "November"])
        self.assertEqual(
            self.finder.available_options(2023, "May"),
            {"type": "groups", "data": [SCIENCES, AUDIO_GROUP]},
        )
        self.assertEqual(
            self.finder.available_options("2023", "May", SCIENCES),
            {"type": "subjects", "data": ["Biology", "Chemistry"]},
        )

    def test_non_numeric_year(self) -> None:
        with self.assertRaises(InvalidQueryError):
            self.finder.available_months("last year")

    def test_search_papers_with_picker_values(self) -> None:
        files = self.finder.search_papers("2023", "May", SCIENCES, "Biology", "HL", "Paper 1")
        self.assertEqual([f.file_id for f in files], ["b1"])

        with self.assertRaises(InvalidQueryError):
            self.finder.search_papers("2023", "May", SCIENCES, "Biology", "HL", "Paper 7")

    def test_search_text(self) -> None:
        self.assertEqual(self.finder.search_text("   "), [])
        self.assertEqual(self.client.calls, [])

        files = self.finder.search_text("chemistry")

        self.assertEqual([f.file_id for f in files], ["c2"])
        _, expr, parent = self.client.calls[-1]
        self.assertIsNone(parent)
        self.assertIn(NameContains("chemistry"), expr.terms[1].terms)
        self.assertIn(FullTextContains("chemistry"), expr.terms[1].terms)

    def test_list_pdf_files(self) -> None:
        self.assertEqual([f.file_id for f in self.finder.list_pdf_files("G4")], ["b1", "c2"])
        self.assertEqual([f.file_id for f in self.finder.list_pdf_files()], ["b1", "c2"])

    def test_get_content_for_pdf_and_audio(self) -> None:
        pdf = self.finder.get_content("b1")
        self.assertEqual(pdf.content_type, "application/pdf")
        self.assertEqual(pdf.data, b"%PDF-1.7")
        self.assertEqual(pdf.name, "Biology_paper_1_HL.pdf")

        audio = self.finder.get_content("a1")
        self.assertEqual(audio.content_type, "audio/mpeg")

    def test_get_content_missing(self) -> None:
        self.assertIsNone(self.finder.get_content("nope"))
        self.assertIsNone(self.finder.get_content("c2"))

    def test_links(self) -> None:
        self.assertEqual(
            self.finder.view_link("b1"), "https://drive.google.com/file/d/b1/view?usp=drivesdk"
        )
        self.assertEqual(self.finder.view_link("gone"), "https://drive.google.com/file/d/gone/view")
        self.assertEqual(
            self.finder.download_link("b1"),
            "https://www.googleapis.com/drive/v3/files/b1?alt=media",
        )

    def test_close_clears_cache_and_client(self) -> None:
        with PaperFinder.from_client(self.client, "ROOT") as finder:
            finder.available_years()
            self.assertGreater(len(finder.cache), 0)

        self.assertEqual(len(finder.cache), 0)
        self.assertTrue(self.client.closed)


class TestPaperFinderFromSettings(unittest.TestCase):
    def test_requires_credentials(self) -> None:
        with self.assertRaises(ConfigError):
            PaperFinder(Settings(root_folder_id="ROOT"))

    def test_builds_client_from_settings(self) -> None:
        auth = AuthInfo(kind="oauth", data={"token_file": "/tmp/token.json"})
        settings = Settings(
            root_folder_id="ROOT",
            auth_info=auth,
            request_timeout=5.0,
            min_year=2015,
            supports_all_drives=False,
        )

        with patch("paperfinder.finder.DriveClient") as client_cls:
            finder = PaperFinder(settings)

        client_cls.assert_called_once_with(auth, timeout=5.0, supports_all_drives=False)
        self.assertEqual(finder.navigator.root_folder_id, "ROOT")


if __name__ == "__main__":
    unittest.main()
