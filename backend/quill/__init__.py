"""
Quill - author credentials and articles behind a token-guarded GraphQL API.
"""

__version__ = "0.1.0"
