import io
import os
import unittest
from unittest import mock

import main
from domain.issues import fetch_error
from infrastructure.observability.logging_utils import clear_sensitive_values


class _StdoutCapture(io.TextIOWrapper):
    def __init__(self) -> None:
        super().__init__(io.BytesIO())


class MainTests(unittest.TestCase):
    def setUp(self) -> None:
        patches = [
            mock.patch.dict(
                os.environ,
                {"GITHUB_ORG": "acme", "GITHUB_REPO": "widgets", "GITHUB_TOKEN": "abc123"},
                clear=True,
            ),
            mock.patch("main.load_dotenv"),
            mock.patch("main.configure_logging"),
        ]
        for patcher in patches:
            patcher.start()
            self.addCleanup(patcher.stop)
        self.addCleanup(clear_sensitive_values)

    def test_pull_writes_raw_body_to_stdout(self) -> None:
        stdout = _StdoutCapture()
        with mock.patch("main.build_issues_fetcher", return_value=lambda *_: b'[{"id":1}]'):
            with mock.patch("main.sys.stdout", stdout):
                exit_code = main.main()

        self.assertEqual(exit_code, 0)
        self.assertEqual(stdout.buffer.getvalue(), b'[{"id":1}]')

    def test_pull_failure_exits_non_zero_without_output(self) -> None:
        def fetch(*_: str) -> bytes:
            raise fetch_error("refused")

        stdout = _StdoutCapture()
        with mock.patch("main.build_issues_fetcher", return_value=fetch):
            with mock.patch("main.sys.stdout", stdout):
                with self.assertLogs("main", level="ERROR"):
                    exit_code = main.main()

        self.assertEqual(exit_code, 1)
        self.assertEqual(stdout.buffer.getvalue(), b"")


if __name__ == "__main__":
    unittest.main()
