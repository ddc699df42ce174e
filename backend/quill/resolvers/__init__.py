"""
GraphQL resolvers and schema assembly.
"""
from quill.resolvers.schema import build_schema

__all__ = ["build_schema"]
