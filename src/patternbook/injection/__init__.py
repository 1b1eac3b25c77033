"""Dependency-injection style demonstrations."""
