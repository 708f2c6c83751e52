"""Application layer orchestrating rounds over the domain services."""
