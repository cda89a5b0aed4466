"""Conversations and messages between users."""
