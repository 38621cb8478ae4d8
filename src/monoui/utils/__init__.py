"""Shared utilities for MonoUI."""
