"""
Compiler Plugin Factory.

MDX toolchains take "recma" plugins: factories that return a transformer called
with the compiled ESTree program. `recma_vue_resolve_components` is that
factory for the component rewrite::

    transformer = recma_vue_resolve_components()
    tree = transformer(tree)
"""

from typing import Callable, Optional

from mdx_vue_resolve.config import RuntimeConfig
from mdx_vue_resolve.core.rewriter import ComponentResolver
from mdx_vue_resolve.core.walker import Node

Transformer = Callable[[Node], Node]


def recma_vue_resolve_components(config: Optional[RuntimeConfig] = None) -> Transformer:
  """
  Builds the transformer that rewrites missing component assertions.

  Args:
      config: Optional names to recognize. The defaults match the MDX compiler.

  Returns:
      Transformer: A callable taking and returning the ``Program`` node.
  """
  resolver = ComponentResolver(config)

  def transformer(tree: Node) -> Node:
    return resolver.rewrite(tree)

  return transformer
