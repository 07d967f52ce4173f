"""Core building blocks: command runner, kubectl client, config model."""
