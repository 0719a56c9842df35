"""
Built-in rewrite rules.

Importing this package registers every rule with ``mdx_vue_resolve.core.hooks``.
"""

from mdx_vue_resolve.rules import jsx_runtime_import, render_function

__all__ = ["jsx_runtime_import", "render_function"]
