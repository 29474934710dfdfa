"""HTTP layer for the alumni admin backend."""
