"""Animated windmill icon widget for Qt."""
from windmill.config import WindmillConfig, load_config
from windmill.model.color import Rgba, ColorFormatError, parse_color

__all__ = ["WindmillConfig", "load_config", "Rgba", "ColorFormatError", "parse_color"]
