"""Menu commands for the interactive session."""
