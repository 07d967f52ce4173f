"""Command line interface for kubectl-select."""
