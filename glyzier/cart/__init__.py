"""Shopping cart with price snapshots."""
