"""
Core rewrite machinery: traversal, structural guards, rule registry, tracing.
"""

from mdx_vue_resolve.core.rewriter import ComponentResolver, resolve_missing_components
from mdx_vue_resolve.core.walker import VisitAction, walk

__all__ = ["ComponentResolver", "VisitAction", "resolve_missing_components", "walk"]
