"""
mdx-vue-resolve Package.

Rewrites the program compiled from an MDX document so that components missing
at runtime are resolved through the target framework's ``resolveComponent``
instead of raising. A build-time component resolver can then replace each
``_resolveComponent("Name")`` call with a direct import.

Usage
-----

.. code-block:: python

    from mdx_vue_resolve import resolve_missing_components

    tree = resolve_missing_components(tree)  # ESTree Program dict, mutated in place

Batch / JSON usage:

.. code-block:: python

    from mdx_vue_resolve import RewriteEngine

    result = RewriteEngine().run_json(estree_json)
    if result.success:
        print(RewriteEngine.to_json(result))
"""

from mdx_vue_resolve.config import RuntimeConfig
from mdx_vue_resolve.core.conversion_result import RewriteResult
from mdx_vue_resolve.core.engine import RewriteEngine
from mdx_vue_resolve.core.rewriter import ComponentResolver, resolve_missing_components
from mdx_vue_resolve.plugin import recma_vue_resolve_components

__version__ = "0.1.0"

__all__ = [
  "ComponentResolver",
  "RewriteEngine",
  "RewriteResult",
  "RuntimeConfig",
  "recma_vue_resolve_components",
  "resolve_missing_components",
  "__version__",
]
