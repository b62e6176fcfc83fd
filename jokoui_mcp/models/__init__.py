"""Data models for the component catalog service."""
