"""Character counting over terminator-ended sequences."""

from .char_counter import CharacterCounter, count_char

__all__ = ["CharacterCounter", "count_char"]
