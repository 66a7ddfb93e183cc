import unittest

from paperfinder.errors import InvalidQueryError
from paperfinder.models import Level, Month, StructuredQuery
from paperfinder.naming import ARTS_GROUP, AUDIO_GROUP

SCIENCES = "Group 4 - Sciences"


class TestStructuredQuery(unittest.TestCase):
    def test_regular_query_requires_level_and_paper(self) -> None:
        q = StructuredQuery(2023, Month.MAY, SCIENCES, "Biology", Level.HL, 1)
        self.assertFalse(q.is_audio)
        self.assertFalse(q.is_music)

        with self.assertRaises(InvalidQueryError):
            StructuredQuery(2023, Month.MAY, SCIENCES, "Biology", Level.HL, None)
        with self.assertRaises(InvalidQueryError):
            StructuredQuery(2023, Month.MAY, SCIENCES, "Biology", None, 1)

    def test_audio_query_rejects_level_and_paper(self) -> None:
        q = StructuredQuery(2023, Month.MAY, AUDIO_GROUP, "Arabic_ab_initio_SL")
        self.assertTrue(q.is_audio)
        with self.assertRaises(InvalidQueryError):
            StructuredQuery(2023, Month.MAY, AUDIO_GROUP, "Arabic_ab_initio_SL", Level.SL)

    def test_music_query_takes_level_only(self) -> None:
        q = StructuredQuery(2023, Month.NOVEMBER, ARTS_GROUP, "Music", Level.SL)
        self.assertTrue(q.is_music)
        with self.assertRaises(InvalidQueryError):
            StructuredQuery(2023, Month.NOVEMBER, ARTS_GROUP, "Music", Level.SL, 1)
        with self.assertRaises(InvalidQueryError):
            StructuredQuery(2023, Month.NOVEMBER, ARTS_GROUP, "Music")

    def test_paper_must_be_known(self) -> None:
        with self.assertRaises(InvalidQueryError):
            StructuredQuery(2023, Month.MAY, SCIENCES, "Biology", Level.HL, 4)

    def test_blank_subject_rejected(self) -> None:
        with self.assertRaises(InvalidQueryError):
            StructuredQuery(2023, Month.MAY, SCIENCES, "  ", Level.HL, 1)


class TestStructuredQueryCreate(unittest.TestCase):
    def test_parses_picker_strings(self) -> None:
        q = StructuredQuery.create("2023", "may", SCIENCES, "Biology", "hl", "Paper 1")
        self.assertEqual(q.year, 2023)
        self.assertIs(q.month, Month.MAY)
        self.assertIs(q.level, Level.HL)
        self.assertEqual(q.paper, 1)

    def test_plain_paper_number(self) -> None:
        q = StructuredQuery.create(2022, "November", SCIENCES, "Physics", "SL", "3")
        self.assertEqual(q.paper, 3)

    def test_drops_fields_for_audio_group(self) -> None:
        q = StructuredQuery.create("2023", "May", AUDIO_GROUP, "Arabic_ab_initio_SL", "HL", "2")
        self.assertIsNone(q.level)
        self.assertIsNone(q.paper)

    def test_drops_paper_for_music(self) -> None:
        q = StructuredQuery.create("2023", "May", ARTS_GROUP, "Music", "SL", "1")
        self.assertIs(q.level, Level.SL)
        self.assertIsNone(q.paper)

    def test_rejects_unparseable_values(self) -> None:
        with self.assertRaises(InvalidQueryError):
            StructuredQuery.create("2023", "June", SCIENCES, "Biology", "HL", "1")
        with self.assertRaises(InvalidQueryError):
            StructuredQuery.create("twenty", "May", SCIENCES, "Biology", "HL", "1")
        with self.assertRaises(InvalidQueryError):
            StructuredQuery.create("2023", "May", SCIENCES, "Biology", "XL", "1")
        with self.assertRaises(InvalidQueryError):
            StructuredQuery.create("2023", "May", SCIENCES, "Biology", "HL", "Paper two")


if __name__ == "__main__":
    unittest.main()
