"""Library management: books, members, loans, plain-text files and a console menu."""

__version__ = "0.1.0"