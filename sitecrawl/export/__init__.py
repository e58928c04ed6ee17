"""Exporter plugins.

Every ``*_exporter.py`` module in this package is discovered at startup.
"""
