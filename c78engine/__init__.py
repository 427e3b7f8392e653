"""Building blocks of a small game engine and editor: identifiers, events, layers, input, files and projects."""

__version__ = "0.1.0"