"""
Website crawler bootstrap.

This package assembles the crawler's command-line options from the core
and from every exporter/analyzer plugin, parses the command line into
them and activates the plugins that the parsed configuration asks for.
The entry point is ``sitecrawl.initiator.Initiator``.
"""

__version__ = "1.0.0"
