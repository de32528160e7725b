"""
Rendering Context

Responsibilities:
- Exposes the public render() entry point
- Rejects top-level input that is not a mapping
- Times and logs each render

Owns: Document assembly entry point
Never: Builds markup for individual sections
"""

from vitae.contexts.rendering.document import render

__all__ = ["render"]
