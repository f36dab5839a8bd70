"""page-title: fetch a web page and report its ``<title>``."""

__version__ = "0.1.0"
