"""Tests for :mod:`tokenauth.service.app_logging`."""

import io
import json
import logging
from unittest import TestCase

from pythonjsonlogger import jsonlogger

from ..app_logging import setup_logger


class TestSetupLogger(TestCase):
    """The root logger gets one stream handler."""

    def setUp(self):
        self.root = logging.getLogger()
        self.handlers = list(self.root.handlers)
        self.level = self.root.level

    def tearDown(self):
        self.root.handlers = self.handlers
        self.root.setLevel(self.level)

    def _new_handler(self):
        added = [h for h in self.root.handlers if h not in self.handlers]
        self.assertEqual(len(added), 1)
        return added[0]

    def test_plain(self):
        """By default records are formatted as text."""
        setup_logger('WARNING')
        handler = self._new_handler()
        self.assertNotIsInstance(handler.formatter, jsonlogger.JsonFormatter)
        self.assertEqual(self.root.level, logging.WARNING)

    def test_json(self):
        """Each record becomes a JSON object."""
        setup_logger('DEBUG', json=True)
        handler = self._new_handler()
        self.assertIsInstance(handler.formatter, jsonlogger.JsonFormatter)

        stream = io.StringIO()
        handler.setStream(stream)
        logging.getLogger('tokenauth.test').info('Issued token for %s',
                                                 'alice')
        record = json.loads(stream.getvalue())
        self.assertEqual(record['message'], 'Issued token for alice')
        self.assertEqual(record['level'], 'INFO')
        self.assertEqual(record['name'], 'tokenauth.test')
        self.assertIn('timestamp', record)
