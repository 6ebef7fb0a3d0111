"""pygame presentation for the checkers engine."""
