"""Click commands for Kyber Tools."""
