import unittest

from paperfinder.auth import OAUTH, SERVICE_ACCOUNT
from paperfinder.config import Settings
from paperfinder.errors import ConfigError, MissingCredentialError


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        s = Settings(root_folder_id="ROOT")
        self.assertIsNone(s.auth_info)
        self.assertEqual(s.request_timeout, 30.0)
        self.assertEqual(s.min_year, 2010)
        self.assertIsNone(s.max_year)
        self.assertTrue(s.supports_all_drives)
        self.assertEqual(s.log_level, "INFO")

    def test_validation(self) -> None:
        with self.assertRaises(ConfigError):
            Settings(root_folder_id="  ")
        with self.assertRaises(ConfigError):
            Settings(root_folder_id="ROOT", request_timeout=0)
        with self.assertRaises(ConfigError):
            Settings(root_folder_id="ROOT", min_year=2020, max_year=2019)
        with self.assertRaises(ConfigError):
            Settings(root_folder_id="ROOT", log_level="LOUD")


class TestSettingsFromEnv(unittest.TestCase):
    def test_reads_all_values(self) -> None:
        s = Settings.from_env({
            "TARGET_FOLDER_ID": " ROOT ",
            "GOOGLE_SERVICE_ACCOUNT_FILE": "/secrets/key.json",
            "PAPERFINDER_REQUEST_TIMEOUT": "12.5",
            "PAPERFINDER_MIN_YEAR": "2015",
            "PAPERFINDER_MAX_YEAR": "2024",
            "PAPERFINDER_SUPPORTS_ALL_DRIVES": "no",
            "LOG_LEVEL": "debug",
        })

        self.assertEqual(s.root_folder_id, "ROOT")
        self.assertEqual(s.auth_info.kind, SERVICE_ACCOUNT)
        self.assertEqual(s.request_timeout, 12.5)
        self.assertEqual(s.min_year, 2015)
        self.assertEqual(s.max_year, 2024)
        self.assertFalse(s.supports_all_drives)
        self.assertEqual(s.log_level, "DEBUG")

    def test_minimal_environment(self) -> None:
        s = Settings.from_env({
            "TARGET_FOLDER_ID": "ROOT",
            "PAPERFINDER_TOKEN_FILE": "/tmp/token.json",
        })
        self.assertEqual(s.auth_info.kind, OAUTH)
        self.assertIsNone(s.max_year)
        self.assertTrue(s.supports_all_drives)

    def test_without_credentials(self) -> None:
        s = Settings.from_env({"TARGET_FOLDER_ID": "ROOT"}, with_credentials=False)
        self.assertIsNone(s.auth_info)

    def test_missing_root(self) -> None:
        with self.assertRaises(ConfigError):
            Settings.from_env({"PAPERFINDER_TOKEN_FILE": "/tmp/token.json"})

    def test_missing_credentials(self) -> None:
        with self.assertRaises(MissingCredentialError):
            Settings.from_env({"TARGET_FOLDER_ID": "ROOT"})

    def test_malformed_values(self) -> None:
        base = {"TARGET_FOLDER_ID": "ROOT"}
        for key, value in (
            ("PAPERFINDER_REQUEST_TIMEOUT", "soon"),
            ("PAPERFINDER_MIN_YEAR", "twenty"),
            ("PAPERFINDER_SUPPORTS_ALL_DRIVES", "maybe"),
        ):
            with self.subTest(key=key):
                with self.assertRaises(ConfigError) as ctx:
                    Settings.from_env(dict(base, **{key: value}), with_credentials=False)
                self.assertEqual(ctx.exception.details[key], value)


if __name__ == "__main__":
    unittest.main()
