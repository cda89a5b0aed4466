"""Favorite products."""
