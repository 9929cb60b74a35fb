"""
Comment CLI

Command-line interface for the comment client.

Usage:
    python -m comment_cli get [URL]
    python -m comment_cli post [URL] --name Bob --text "Hello, World"
    python -m comment_cli put [URL] --id 102 --name Alice --text "Hi, everyone"
    python -m comment_cli serve --port 8000
"""

__version__ = "0.1.0"
