"""Public API surface for ricecombine.processing."""
__all__ = [
    "line_ops",
    "rewrite_rules",
    "text_ops",
]
