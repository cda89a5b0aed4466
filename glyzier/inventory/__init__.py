"""Stock records with the unlimited sentinel."""
