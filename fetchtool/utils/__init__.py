"""Helpers for URL handling, HTTP access and retries."""
