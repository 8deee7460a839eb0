"""
Text tree rendering for nested CMS structures (folders, layouts).
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

Node = Mapping[str, Any]


def _default_label(node: Node) -> str:
    label = f"{node.get('type') or 'folder'}: {node.get('name') or node.get('text')}"
    if node.get("type") == "widget" and node.get("duration") is not None:
        label += f" ({node['duration']}s)"
    return label


def _children(node: Node) -> Sequence[Node]:
    children = node.get("children")
    # The CMS sometimes sends children as a string placeholder
    return children if isinstance(children, list) else []


def render_tree(
    nodes: Sequence[Node],
    indent: str = "",
    label: Callable[[Node], str] | None = None,
) -> str:
    """Render nodes as an indented ├─ / └─ tree, one node per line."""
    label = label or _default_label
    lines: list[str] = []
    for index, node in enumerate(nodes):
        is_last = index == len(nodes) - 1
        lines.append(f"{indent}{'└─ ' if is_last else '├─ '}{label(node)}\n")
        children = _children(node)
        if children:
            lines.append(render_tree(children, indent + ("   " if is_last else "│  "), label))
    return "".join(lines)


def flatten_tree(
    nodes: Sequence[Node],
    depth: int = 0,
    path: str = "",
) -> list[dict[str, Any]]:
    """
    Flatten nested nodes into a list with depth and a "A > B > C" path.

    Each entry keeps id, name, type, depth, isLast and path.
    """
    result: list[dict[str, Any]] = []
    for index, node in enumerate(nodes):
        name = str(node.get("name") or node.get("text") or "")
        current = f"{path} > {name}" if path else name
        entry: dict[str, Any] = {
            "id": node.get("id"),
            "name": name,
            "type": node.get("type") or "folder",
            "depth": depth,
            "isLast": index == len(nodes) - 1,
            "path": current,
        }
        if node.get("duration") is not None:
            entry["duration"] = node["duration"]
        result.append(entry)
        result.extend(flatten_tree(_children(node), depth + 1, current))
    return result
