"""Shared utilities for CSS Variants."""
