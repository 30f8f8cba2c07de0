"""Queries and a curses menu over a catalogue of users, flights, reservations, hotels and airports."""

__version__ = "0.1.0"