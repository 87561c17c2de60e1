"""HTTP interface to the scoring core."""
