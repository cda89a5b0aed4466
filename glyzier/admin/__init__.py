"""Admin dashboard and moderation."""
