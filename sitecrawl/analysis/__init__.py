"""Analyzer plugins.

Every ``*_analyzer.py`` module in this package is discovered at startup.
"""
