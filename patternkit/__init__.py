"""Small algorithms, textbook design patterns and toy systems, one module each."""

__version__ = "0.1.0"