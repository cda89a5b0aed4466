"""Seller store profiles."""
