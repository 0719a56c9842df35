"""
Shared utilities: console logging and ESTree node rendering.
"""
