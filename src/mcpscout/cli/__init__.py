"""mcpscout command-line interface."""
