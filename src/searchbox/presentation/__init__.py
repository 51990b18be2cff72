"""Presentation layer - textual widgets for the search box."""
