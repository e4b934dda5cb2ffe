"""Polo club barn management service."""
