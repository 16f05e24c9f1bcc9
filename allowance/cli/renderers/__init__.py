"""Renderers turning SDK output into terminal tables."""
