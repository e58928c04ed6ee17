"""Analyzer inspecting the certificate and TLS setup of the target host."""

from __future__ import annotations

from urllib.parse import urlparse

from sitecrawl.analysis.analyzer import BaseAnalyzer


class SslTlsAnalyzer(BaseAnalyzer):
    """Only meaningful for HTTPS targets; declares no options."""

    def should_be_activated(self) -> bool:
        url = self.option_value("--url")
        if not url or urlparse(url).scheme != "https":
            return False
        return self.passes_filter()
