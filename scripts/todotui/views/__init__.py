"""Textual screens and widgets for the list editor."""
