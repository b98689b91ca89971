"""Scanning, parsing and rendering stages of the generator."""
