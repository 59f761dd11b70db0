import os
import tempfile
import unittest

from PySide6.QtCore import QSettings

from windmill.config import DEFAULT_FILL_COLOR, TICK_INTERVAL_MS, WindmillConfig, load_config
from windmill.model.color import ColorFormatError, Rgba, WHITE, parse_color


class ColorTests(unittest.TestCase):
    def test_rgb(self):
        self.assertEqual(parse_color("#FF8000"), Rgba(255, 128, 0, 255))

    def test_alpha_first(self):
        self.assertEqual(parse_color("#80FF8000"), Rgba(255, 128, 0, 128))

    def test_named(self):
        self.assertEqual(parse_color(" White "), WHITE)

    def test_to_hex(self):
        self.assertEqual(Rgba(1, 2, 3, 4).to_hex(), "#04010203")
        self.assertEqual(parse_color(Rgba(1, 2, 3, 4).to_hex()), Rgba(1, 2, 3, 4))

    def test_invalid(self):
        for text in ("", "#12345", "#GGGGGG", "mauve-ish", "123456",
                     "#-1-2-3", "#+f+f+f", "# 1 2 3", "#1_2_3_", "#12 34 56"):
            with self.subTest(text=text):
                with self.assertRaises(ColorFormatError):
                    parse_color(text)

    def test_error_is_value_error(self):
        self.assertTrue(issubclass(ColorFormatError, ValueError))


class LoadConfigTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.settings = QSettings(os.path.join(self._tmp.name, "windmill.ini"), QSettings.Format.IniFormat)

    def tearDown(self):
        del self.settings
        self._tmp.cleanup()

    def test_defaults(self):
        self.assertEqual(load_config(), WindmillConfig(DEFAULT_FILL_COLOR, TICK_INTERVAL_MS))
        self.assertEqual(DEFAULT_FILL_COLOR, WHITE)
        self.assertEqual(TICK_INTERVAL_MS, 10)

    def test_reads_settings(self):
        self.settings.setValue("windmill/color", "#00FF00")
        self.settings.setValue("windmill/interval_ms", 25)
        config = load_config(self.settings)
        self.assertEqual(config.fill_color, Rgba(0, 255, 0))
        self.assertEqual(config.interval_ms, 25)

    def test_overrides_win(self):
        self.settings.setValue("windmill/color", "#00FF00")
        config = load_config(self.settings, overrides={"color": "black", "interval_ms": "40"})
        self.assertEqual(config.fill_color, Rgba(0, 0, 0))
        self.assertEqual(config.interval_ms, 40)

    def test_none_override_is_ignored(self):
        self.settings.setValue("windmill/color", "#00FF00")
        config = load_config(self.settings, overrides={"color": None})
        self.assertEqual(config.fill_color, Rgba(0, 255, 0))

    def test_bad_values_fall_back(self):
        with self.assertLogs("windmill.config", level="WARNING") as logs:
            config = load_config(overrides={"color": "#nope", "interval_ms": "0"})
        self.assertEqual(config, WindmillConfig())
        self.assertEqual(len(logs.records), 2)


if __name__ == "__main__":
    unittest.main()
