"""Tests for opt-in debug logging."""

from __future__ import annotations

import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from labeljump.logging_setup import DEBUG_LOG_ENV, configure_logging


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger("labeljump")
        self.saved_handlers = list(self.logger.handlers)
        self.saved_level = self.logger.level

    def tearDown(self) -> None:
        for handler in self.logger.handlers:
            if handler not in self.saved_handlers:
                handler.close()
        self.logger.handlers = self.saved_handlers
        self.logger.setLevel(self.saved_level)

    def test_disabled_without_path_or_env(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(configure_logging(None))

    def test_repeated_calls_attach_one_handler(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.logger.handlers = []
            configure_logging(None)
            configure_logging(None)
            self.assertEqual(len(self.logger.handlers), 1)

        with tempfile.TemporaryDirectory() as tmp:
            log_path = str(Path(tmp) / "debug.log")
            first = configure_logging(log_path)
            second = configure_logging(log_path)
            self.assertIs(first, second)
            file_handlers = [h for h in self.logger.handlers if isinstance(h, logging.FileHandler)]
            self.assertEqual(file_handlers, [first])

    def test_unopenable_path_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                configure_logging(str(Path(tmp) / "missing" / "debug.log"))

    def test_env_path_receives_session_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "debug.log"
            with mock.patch.dict(os.environ, {DEBUG_LOG_ENV: str(log_path)}):
                handler = configure_logging(None)
            self.assertIsNotNone(handler)
            logging.getLogger("labeljump.jump.session").debug("session open: mode=%s", "jump")
            handler.flush()
            self.assertIn("session open: mode=jump", log_path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
