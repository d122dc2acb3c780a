"""DevConnect command-line interface."""
