"""Paddock command-line interface."""
