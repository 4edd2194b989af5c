"""2DO — account subsystem: signup, login and user storage."""

__version__ = "1.0.0"
