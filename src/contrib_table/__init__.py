"""contrib-table: render a repository's contributors as a markdown avatar table."""

__version__ = "0.1.0"
