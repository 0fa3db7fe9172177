"""HTTP surface for the jobs status."""
