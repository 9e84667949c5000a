"""Shared building blocks of the resize pipeline."""
