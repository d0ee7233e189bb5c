"""Adapters layer - Concrete implementations of ports.

Adapters implement the port protocols defined in the ports layer,
wrapping external tools such as the Graphviz renderer.
"""
