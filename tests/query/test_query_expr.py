import unittest

from paperfinder.models import RemoteFile
from paperfinder.query import (
    And,
    FullTextContains,
    MimeTypeContains,
    NameContains,
    NameIs,
    Or,
    ParentIn,
    Trashed,
    all_of,
    any_of,
    is_audio,
    is_folder,
    is_pdf,
)
from paperfinder.util.mime import FOLDER_MIME, PDF_MIME


def _file(name: str, mime: str = PDF_MIME, parents=("P1",), trashed: bool = False) -> RemoteFile:
    return RemoteFile(file_id=name, name=name, mime_type=mime, parents=tuple(parents), trashed=trashed)


class TestExprMatches(unittest.TestCase):
    def test_name_contains_is_case_insensitive(self) -> None:
        f = _file("Biology_paper_1_HL.pdf")
        self.assertTrue(NameContains("biology").matches(f))
        self.assertFalse(NameContains("Chemistry").matches(f))

    def test_name_is_exact(self) -> None:
        f = _file("2023", FOLDER_MIME)
        self.assertTrue(NameIs("2023").matches(f))
        self.assertFalse(NameIs("202").matches(f))

    def test_parent_mime_and_trashed(self) -> None:
        f = _file("a.pdf", parents=("P1", "P2"), trashed=True)
        self.assertTrue(ParentIn("P2").matches(f))
        self.assertFalse(ParentIn("P3").matches(f))
        self.assertTrue(is_pdf().matches(f))
        self.assertFalse(is_folder().matches(f))
        self.assertTrue(Trashed(True).matches(f))
        self.assertTrue(MimeTypeContains("PDF").matches(f))

    def test_full_text_falls_back_to_name(self) -> None:
        self.assertTrue(FullTextContains("paper").matches(_file("Physics_paper_2.pdf")))

    def test_is_audio_accepts_mp3_name(self) -> None:
        self.assertTrue(is_audio().matches(_file("French_B_HL.mp3", "application/octet-stream")))
        self.assertTrue(is_audio().matches(_file("x", "audio/mpeg")))
        self.assertFalse(is_audio().matches(_file("x.pdf")))


class TestExprCombinators(unittest.TestCase):
    def test_operators_build_flat_nodes(self) -> None:
        expr = NameContains("a") & NameContains("b") & NameContains("c")
        self.assertIsInstance(expr, And)
        self.assertEqual(len(expr.terms), 3)

        alt = NameContains("a") | NameContains("b") | NameContains("c")
        self.assertIsInstance(alt, Or)
        self.assertEqual(len(alt.terms), 3)

    def test_all_of_and_any_of_semantics(self) -> None:
        f = _file("Biology_HL.pdf")
        self.assertTrue(all_of(is_pdf(), NameContains("HL")).matches(f))
        self.assertFalse(all_of(is_pdf(), NameContains("SL")).matches(f))
        self.assertTrue(any_of(NameContains("SL"), NameContains("HL")).matches(f))

    def test_empty_combination_rejected(self) -> None:
        with self.assertRaises(ValueError):
            all_of()

    def test_nodes_are_immutable_and_hashable(self) -> None:
        self.assertEqual(NameContains("x"), NameContains("x"))
        self.assertEqual(len({NameContains("x"), NameContains("x")}), 1)


if __name__ == "__main__":
    unittest.main()
