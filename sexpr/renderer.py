"""
lispcss Renderer - Turns parsed Nodes into CSS text.

Nested Nodes become descendant selectors: (ul (li ...)) renders ' ul li'.
"""

import re

from sexpr.config import DEFAULT_INDENT

# Comma-inclusive split: 'h1,h2' -> ['h1,', 'h2']
_SELECTOR_PART = re.compile(r'[^,]*,|[^,]+')


def split_selector(text):
    return _SELECTOR_PART.findall(text)


def full_selector(node, parent=""):
    """Prefix every comma-separated part of the node's selector with the parent."""
    return "\n".join(f"{parent} {part}" for part in split_selector(node.selector.text))


def render(node, parent="", indent=DEFAULT_INDENT):
    """
    Render one Node and its descendants, depth-first in document order.

    A Node without rules emits no block of its own, but its selector is still
    passed down to its children.
    """
    blocks = []
    stack = [(node, parent)]
    while stack:
        current, prefix = stack.pop()
        selector = full_selector(current, prefix)
        if current.rules:
            rules = "\n".join(f"{indent}{rule.property}: {' '.join(rule.value)};" for rule in current.rules)
            blocks.append(f"{selector} {{\n{rules}\n}}\n")
        stack.extend((child, selector) for child in reversed(current.children))
    return "".join(blocks)


def render_document(nodes, indent=DEFAULT_INDENT):
    return "".join(render(node, "", indent) for node in nodes)
