"""Order placement and order history."""
