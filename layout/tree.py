"""Tidy tree layout for arbitrary-depth hierarchies.

Depth drives the vertical coordinate (`depth / max_depth * height`). Leaves are
spaced evenly across the width in left-to-right order, and every internal node
is centered over the mean of its children's x. Leaf spacing ignores subtree
size, so unbalanced trees may look unevenly spread; no Reingold-Tilford
compaction is attempted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .dto import PositionedNode, TreeLink, TreeNode


def tree_from_mapping(mapping: Mapping[str, Any]) -> TreeNode:
    """Build a TreeNode hierarchy from nested `{"name", "children"}` mappings.

    Keys other than `name` and `children` are kept in `TreeNode.data`.
    """

    children = tuple(tree_from_mapping(child) for child in mapping.get("children") or ())
    data = {key: value for key, value in mapping.items() if key not in ("name", "children")}
    return TreeNode(label=str(mapping.get("name", "")), children=children, data=data)


def layout_tree(root: TreeNode | None, width: float, height: float) -> PositionedNode | None:
    """Position every node of a hierarchy inside a `width` x `height` area.

    Args:
        root: Hierarchy root, or None for an empty hierarchy.
        width: Horizontal extent; leaf `i` of `n` lands at `(i + 1) * width / (n + 1)`.
        height: Vertical extent; the deepest level lands at `height`.

    Returns:
        A new positioned tree mirroring `root`, or None when `root` is None. A
        single-node tree puts the root at `(width / 2, 0)`.
    """

    if root is None:
        return None

    leaf_count = 0
    max_depth = 0
    stack: list[tuple[TreeNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        max_depth = max(max_depth, depth)
        if not node.children:
            leaf_count += 1
        stack.extend((child, depth + 1) for child in reversed(node.children))

    leaf_step = width / (leaf_count + 1)
    next_leaf = 0
    finished: list[PositionedNode] = []

    # Post-order: a finished node's children are the last results on `finished`.
    walk: list[tuple[TreeNode, int, bool]] = [(root, 0, False)]
    while walk:
        node, depth, expanded = walk.pop()
        if not expanded and node.children:
            walk.append((node, depth, True))
            walk.extend((child, depth + 1, False) for child in reversed(node.children))
            continue

        children: tuple[PositionedNode, ...] = ()
        if node.children:
            children = tuple(finished[-len(node.children) :])
            del finished[-len(node.children) :]
            x = sum(child.x for child in children) / len(children)
        else:
            next_leaf += 1
            x = next_leaf * leaf_step
        y = depth / max_depth * height if max_depth else 0.0
        finished.append(
            PositionedNode(
                label=node.label,
                x=x,
                y=y,
                depth=depth,
                children=children,
                data=dict(node.data),
            )
        )

    return finished[0]


def descendants(root: PositionedNode | None) -> tuple[PositionedNode, ...]:
    """Return every node in pre-order (parent before children, left to right)."""

    if root is None:
        return ()
    nodes: list[PositionedNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        nodes.append(node)
        stack.extend(reversed(node.children))
    return tuple(nodes)


def links(root: PositionedNode | None) -> tuple[TreeLink, ...]:
    """Return one parent-to-child link per non-root node, in pre-order of the child."""

    if root is None:
        return ()
    result: list[TreeLink] = []
    stack: list[tuple[PositionedNode, PositionedNode | None]] = [(root, None)]
    while stack:
        node, parent = stack.pop()
        if parent is not None:
            result.append(TreeLink(source=parent, target=node))
        stack.extend((child, node) for child in reversed(node.children))
    return tuple(result)
