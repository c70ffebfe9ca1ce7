"""Bloglist backend application package."""
