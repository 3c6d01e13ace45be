"""A minimal full-screen text editor for ANSI terminals, with its layout toolkit."""

__version__ = "0.1.0"