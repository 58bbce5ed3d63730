"""Small command-line utilities: Cyrillic text recoding, weather reports and directory trees."""

__version__ = "0.1.0"
__all__ = ["recode", "weather", "dirtree"]