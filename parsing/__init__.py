"""Fragment parsing, attribute classification and the cleaning transforms."""
