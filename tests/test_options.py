"""
Unit tests for LoggerOptions and per-call merging.
"""

import copy
import unittest

from devlog.channels import Channel
from devlog.options import LoggerOptions, merge_options, forced


def shout(text):
    return text.upper()


def whisper(text):
    return text.lower()


class TestLoggerOptions(unittest.TestCase):

    def test_defaults(self):
        options = LoggerOptions()
        self.assertFalse(options.always_log)
        self.assertTrue(options.log_if_development)
        self.assertTrue(options.show_file_prefix)
        self.assertIsNone(options.prefix)
        self.assertTrue(options.debug_enabled)
        self.assertEqual(dict(options.colors), {})

    def test_color_keys_normalised(self):
        options = LoggerOptions(colors={'LOG': shout, Channel.ERROR: whisper, 'nope': shout})
        self.assertEqual(dict(options.colors), {Channel.LOG: shout, Channel.ERROR: whisper})

    def test_non_callable_colors_dropped(self):
        options = LoggerOptions(colors={'log': 'yellow', 'warn': None})
        self.assertEqual(dict(options.colors), {Channel.WARN: None})

    def test_plain_has_no_formatter(self):
        options = LoggerOptions(colors={'plain': shout, 'log': shout})
        self.assertIsNone(options.formatter_for(Channel.PLAIN))
        self.assertIs(options.formatter_for(Channel.LOG), shout)

    def test_hashable(self):
        self.assertEqual(hash(LoggerOptions()), hash(LoggerOptions()))
        with_colors = LoggerOptions(prefix='a', colors={'log': shout})
        self.assertIn(with_colors, {with_colors})

    def test_deepcopy(self):
        options = LoggerOptions(prefix='a', colors={'log': shout})
        copied = copy.deepcopy(options)
        self.assertEqual(copied, options)
        self.assertIs(copied.formatter_for(Channel.LOG), shout)

    def test_frozen(self):
        with self.assertRaises(Exception):
            LoggerOptions().always_log = True


class TestMergeOptions(unittest.TestCase):

    def test_none_returns_base(self):
        base = LoggerOptions(prefix='A')
        self.assertIs(merge_options(base, None), base)

    def test_override_applies(self):
        merged = merge_options(LoggerOptions(), {'always_log': True, 'prefix': 'job'})
        self.assertTrue(merged.always_log)
        self.assertEqual(merged.prefix, 'job')

    def test_base_untouched(self):
        base = LoggerOptions()
        merge_options(base, {'always_log': True, 'colors': {'log': shout}})
        self.assertFalse(base.always_log)
        self.assertEqual(dict(base.colors), {})

    def test_unknown_keys_ignored(self):
        base = LoggerOptions()
        merged = merge_options(base, {'bogus': 1, 'alwaysLog': True})
        self.assertEqual(merged, base)

    def test_colors_merge_per_channel(self):
        base = LoggerOptions(colors={'log': shout, 'error': shout})
        merged = merge_options(base, {'colors': {'error': whisper, 'debug': None}})
        self.assertIs(merged.colors[Channel.LOG], shout)
        self.assertIs(merged.colors[Channel.ERROR], whisper)
        self.assertIsNone(merged.colors[Channel.DEBUG])

    def test_forced(self):
        base = LoggerOptions(always_log=False, debug_enabled=False, prefix='p')
        result = forced(base)
        self.assertTrue(result.always_log)
        self.assertTrue(result.debug_enabled)
        self.assertEqual(result.prefix, 'p')
        self.assertFalse(base.always_log)


if __name__ == '__main__':
    unittest.main()
