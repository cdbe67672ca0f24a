"""Command-line interface for fleetledger."""
