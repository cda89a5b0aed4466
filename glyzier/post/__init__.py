"""Community posts, comments and likes."""
