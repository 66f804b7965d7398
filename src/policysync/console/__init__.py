"""Console output and logging setup."""
