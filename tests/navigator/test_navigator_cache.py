import unittest

from paperfinder.models import FolderHandle
from paperfinder.navigator import MetadataCache


class TestMetadataCache(unittest.TestCase):
    def test_folder_handles_by_path(self) -> None:
        cache = MetadataCache()
        handle = FolderHandle("G4", "Group 4 - Sciences")

        self.assertIsNone(cache.get_folder((2023, "May", "Group 4 - Sciences")))
        cache.put_folder((2023, "May", "Group 4 - Sciences"), handle)

        self.assertEqual(cache.get_folder((2023, "May", "Group 4 - Sciences")), handle)
        self.assertIsNone(cache.get_folder((2023, "May")))

    def test_put_is_idempotent(self) -> None:
        cache = MetadataCache()
        handle = FolderHandle("Y23", "2023")
        cache.put_folder((2023,), handle)
        cache.put_folder((2023,), handle)
        self.assertEqual(len(cache), 1)

    def test_listings_are_returned_as_copies(self) -> None:
        cache = MetadataCache()
        cache.put_subjects(2023, "May", "Group 4 - Sciences", ["Biology", "Chemistry"])

        got = cache.get_subjects(2023, "May", "Group 4 - Sciences")
        got.append("Physics")

        self.assertEqual(cache.get_subjects(2023, "May", "Group 4 - Sciences"), ["Biology", "Chemistry"])

    def test_years_and_months(self) -> None:
        cache = MetadataCache()
        self.assertIsNone(cache.get_years())
        self.assertIsNone(cache.get_months(2023))

        cache.put_years([2023, 2022])
        cache.put_months(2023, ["May", "November"])
        cache.put_subject_folders(2023, "May", [FolderHandle("G4", "Group 4 - Sciences")])

        self.assertEqual(cache.get_years(), [2023, 2022])
        self.assertEqual(cache.get_months(2023), ["May", "November"])
        self.assertEqual(
            cache.get_subject_folders(2023, "May"), [FolderHandle("G4", "Group 4 - Sciences")]
        )

    def test_clear(self) -> None:
        cache = MetadataCache()
        cache.put_years([2023])
        cache.put_folder((2023,), FolderHandle("Y23", "2023"))
        self.assertEqual(len(cache), 2)

        cache.clear()

        self.assertEqual(len(cache), 0)
        self.assertIsNone(cache.get_years())


if __name__ == "__main__":
    unittest.main()
