# tests/test_error_handler.py
import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from error_handler import ErrorHandler
from error_messages import ErrorMessages, ProviderError, InvalidWindowSizeError


class TestErrorHandler(unittest.TestCase):

    def setUp(self):
        self.handler = ErrorHandler(clock=lambda: 100.0)

    def test_classifies_builtin_errors(self):
        cases = [
            (ConnectionError("down"), 'NETWORK_001'),
            (TimeoutError("slow"), 'NETWORK_002'),
            (FileNotFoundError("gone"), 'FILE_001'),
            (PermissionError("no"), 'FILE_002'),
            (ValueError("bad"), 'CONFIG_002'),
            (RuntimeError("?"), 'APP_002'),
        ]
        for exception, code in cases:
            with self.assertLogs('error_handler', level='ERROR'):
                info = self.handler.handle_exception(exception, context="test")
            self.assertEqual(info['code'], code)
            self.assertFalse(info['critical'])

    def test_calendar_errors_keep_their_own_message(self):
        with self.assertLogs('error_handler', level='ERROR'):
            info = self.handler.handle_exception(InvalidWindowSizeError(7))
        self.assertEqual(info['code'], 'CALENDAR_001')
        self.assertIn('7', info['message'])
        self.assertEqual(info['suggestions'], ErrorMessages.INVALID_WINDOW_SIZE['suggestions'])

        with self.assertLogs('error_handler', level='ERROR'):
            info = self.handler.handle_exception(ProviderError("source offline"))
        self.assertEqual(info['title'], 'Provider Error')
        self.assertEqual(info['code'], 'CALENDAR_000')

    def test_user_message(self):
        with self.assertLogs('error_handler', level='ERROR'):
            info = self.handler.handle_exception(RuntimeError("x"), user_message="Try again")
        self.assertEqual(info['message'], "Try again")
        self.assertEqual(info['code'], 'CUSTOM_001')

    def test_memory_error_is_critical(self):
        with self.assertLogs('error_handler', level='ERROR'):
            info = self.handler.handle_exception(MemoryError())
        self.assertTrue(info['critical'])
        self.assertEqual(info['code'], 'APP_001')

    def test_repeated_errors_are_suppressed(self):
        results = []
        with self.assertLogs('error_handler', level='ERROR'):
            for _ in range(7):
                results.append(self.handler.handle_exception(ConnectionError())['suppressed'])
        self.assertEqual(results, [False] * 5 + [True, True])
        self.handler.reset_error_count()
        self.assertEqual(self.handler.error_count, 0)
        self.assertIsNone(self.handler.last_error_info)

    def test_returned_info_is_a_copy(self):
        with self.assertLogs('error_handler', level='ERROR'):
            info = self.handler.handle_exception(ConnectionError())
        info['message'] = 'changed'
        self.assertNotEqual(ErrorMessages.NETWORK_ERROR['message'], 'changed')

    def test_format_suggestions(self):
        self.assertEqual(ErrorMessages.format_suggestions([]), "")
        self.assertEqual(ErrorMessages.format_suggestions(["Retry"]), "Suggestion: Retry")
        self.assertEqual(ErrorMessages.format_suggestions(["A", "B"]), "Suggestions:\n1. A\n2. B")


if __name__ == '__main__':
    unittest.main()
