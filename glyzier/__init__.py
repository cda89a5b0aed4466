"""Glyzier marketplace backend."""
