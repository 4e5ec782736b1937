"""Utility helpers: logging, HTML sanitizing."""
