"""Command-line tools: dataset validation and one-off evaluations."""
