"""Curtain Call: impressions of theatre performances."""
