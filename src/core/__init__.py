"""Core domain package for contentscope.

Core contains metadata derivation, faceting, filtering, and sorting logic
without any file, terminal, or clipboard-specific code, keeping the content
rules portable.
"""
