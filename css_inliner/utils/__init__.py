"""Utilities for CSS Inliner."""
