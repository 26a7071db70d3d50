"""Pub/sub workers."""
