"""An interactive prompt that splits command lines into tokens, with character, byte, string, list, output and number helpers."""

__version__ = "0.1.0"