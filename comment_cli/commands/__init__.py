"""
CLI command modules.
"""

from comment_cli.commands import send, serve

__all__ = ["send", "serve"]
