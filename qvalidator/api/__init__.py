"""HTTP surface for the validation engine."""
