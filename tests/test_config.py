"""
Unit tests for the configuration manager.
Run from project root: python -m pytest tests/ -v
"""
import os
import sys
import unittest
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pngn_config import (
    ConfigurationManager, MatcherConfig, OutputConfig, PaletteSystemConfig,
    get_config, get_matcher_config, get_output_config,
    register_config_callback, reload_config, unregister_config_callback,
)
from pngn_match import PaletteMatcher


class TestValidation(unittest.TestCase):

    def test_defaults_are_valid(self):
        self.assertTrue(PaletteSystemConfig().validate())

    def test_cache_size_must_be_positive(self):
        with self.assertRaises(ValueError):
            MatcherConfig(cache_size=0).validate()

    def test_output_flags_must_be_bool(self):
        with self.assertRaises(ValueError):
            OutputConfig(enable_color="yes").validate()

    def test_unknown_log_level(self):
        with self.assertRaises(ValueError):
            PaletteSystemConfig(log_level="LOUD").validate()


class TestConfigurationManager(unittest.TestCase):

    def tearDown(self):
        reload_config(PaletteSystemConfig())

    def test_singleton(self):
        self.assertIs(ConfigurationManager(), ConfigurationManager())

    def test_reload_applies_new_config(self):
        self.assertTrue(reload_config(PaletteSystemConfig(matcher=MatcherConfig(cache_size=16))))
        self.assertEqual(get_matcher_config().cache_size, 16)
        self.assertEqual(get_config().matcher.cache_size, 16)

    def test_failed_reload_keeps_previous_config(self):
        before = get_config()
        self.assertFalse(reload_config(PaletteSystemConfig(matcher=MatcherConfig(cache_size=-1))))
        self.assertIs(get_config(), before)

    def test_callbacks(self):
        calls = []

        def callback(old, new):
            calls.append((old, new))

        register_config_callback(callback)
        try:
            new_config = PaletteSystemConfig(debug_mode=True)
            reload_config(new_config)
            self.assertEqual(len(calls), 1)
            self.assertIs(calls[0][1], new_config)
        finally:
            unregister_config_callback(callback)

        reload_config(PaletteSystemConfig())
        self.assertEqual(len(calls), 1)

    def test_failing_callback_does_not_abort_reload(self):
        def broken(old, new):
            raise RuntimeError("boom")

        register_config_callback(broken)
        try:
            self.assertTrue(reload_config(PaletteSystemConfig(log_level="DEBUG")))
            self.assertEqual(get_config().log_level, "DEBUG")
        finally:
            unregister_config_callback(broken)

    def test_environment_overrides(self):
        env = {
            'PNGN_MATCH_CACHE_SIZE': '32',
            'PNGN_MATCH_CACHE': 'false',
            'PNGN_RESET_BEFORE_COLOR': 'no',
            'PNGN_DEBUG': '1',
            'PNGN_LOG_LEVEL': 'warning',
        }
        with mock.patch.dict(os.environ, env):
            os.environ.pop('NO_COLOR', None)
            os.environ.pop('PNGN_ENABLE_COLOR', None)
            self.assertTrue(reload_config())
        config = get_config()
        self.assertEqual(config.matcher.cache_size, 32)
        self.assertFalse(config.matcher.enable_caching)
        self.assertFalse(config.output.reset_before_color)
        self.assertTrue(config.output.enable_color)
        self.assertTrue(config.debug_mode)
        self.assertEqual(config.log_level, 'WARNING')

    def test_no_color_disables_output(self):
        with mock.patch.dict(os.environ, {'NO_COLOR': '', 'PNGN_ENABLE_COLOR': 'true'}):
            reload_config()
        self.assertFalse(get_output_config().enable_color)

    def test_matcher_follows_reload(self):
        matcher = PaletteMatcher(cache_size=8, enable_cache=True)
        try:
            for v in range(6):
                matcher.match(v, v, v)
            reload_config(PaletteSystemConfig(matcher=MatcherConfig(cache_size=2)))
            stats = matcher.get_stats()
            self.assertEqual(stats['cache_entries'], 2)
            self.assertEqual(stats['cache_evictions'], 4)

            reload_config(PaletteSystemConfig(matcher=MatcherConfig(enable_caching=False)))
            self.assertFalse(matcher.get_stats()['cache_enabled'])
            self.assertEqual(matcher.get_stats()['cache_entries'], 0)
        finally:
            matcher.close()

    def test_closed_matcher_ignores_reload(self):
        matcher = PaletteMatcher(cache_size=8, enable_cache=True)
        matcher.close()
        matcher.match(1, 2, 3)
        reload_config(PaletteSystemConfig(matcher=MatcherConfig(enable_caching=False)))
        stats = matcher.get_stats()
        self.assertTrue(stats['cache_enabled'])
        self.assertEqual(stats['cache_entries'], 1)
        matcher.close()


if __name__ == "__main__":
    unittest.main()
