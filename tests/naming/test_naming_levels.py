import unittest

from paperfinder.models import Level, RemoteFile
from paperfinder.naming.levels import filter_music_level, level_markers, matches_music_level
from paperfinder.util.mime import PDF_MIME


class TestLevels(unittest.TestCase):
    def test_level_markers(self) -> None:
        self.assertEqual(level_markers("Biology_paper_1_HL.pdf"), {"HL"})
        self.assertEqual(level_markers("Music___HLSL_markscheme.pdf"), {"HLSL"})
        self.assertEqual(level_markers("Music_markscheme.pdf"), set())
        self.assertEqual(level_markers("English_B_Slovak.pdf"), set())

    def test_music_level_rule(self) -> None:
        self.assertTrue(matches_music_level("Music_HL.pdf", Level.HL))
        self.assertFalse(matches_music_level("Music_SL.pdf", Level.HL))
        self.assertTrue(matches_music_level("Music_HLSL.pdf", Level.SL))
        self.assertTrue(matches_music_level("Music_markscheme.pdf", "HL"))

    def test_filter_music_level(self) -> None:
        files = [
            RemoteFile(file_id=n, name=n, mime_type=PDF_MIME)
            for n in ("Music_HL.pdf", "Music_SL.pdf", "Music_audio_booklet.pdf")
        ]
        kept = filter_music_level(files, Level.SL)
        self.assertEqual([f.name for f in kept], ["Music_SL.pdf", "Music_audio_booklet.pdf"])


if __name__ == "__main__":
    unittest.main()
