"""Recover the source text and line of an assertion call from its caller's frame.

Assertions report the literal expressions they were given, not their
values. The caller passes values only, so the text is read back from the
caller's source file: the call expression is located in the module's
AST and the argument segments are sliced out of the source.
"""

from __future__ import annotations

import ast
import inspect
import linecache
from functools import lru_cache
from types import FrameType
from typing import NamedTuple

UNKNOWN = "<unknown>"


class CallSite(NamedTuple):
    line: int
    texts: list[str]


@lru_cache(maxsize=64)
def _parse(source: str) -> ast.Module | None:
    try:
        return ast.parse(source)
    except SyntaxError:
        return None


def _callee_name(node: ast.Call) -> str | None:
    if isinstance(node.func, ast.Name):
        return node.func.id
    if isinstance(node.func, ast.Attribute):
        return node.func.attr
    return None


def _find_call(
    tree: ast.Module, frame: FrameType, func_name: str
) -> ast.Call | None:
    lineno = frame.f_lineno
    positions = getattr(inspect.getframeinfo(frame, context=0), "positions", None)

    by_name: list[ast.Call] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        # Exact match on the instruction's source span when the interpreter records one
        if positions is not None and positions.col_offset is not None:
            if (
                node.lineno == positions.lineno
                and node.col_offset == positions.col_offset
                and node.end_lineno == positions.end_lineno
                and node.end_col_offset == positions.end_col_offset
            ):
                return node
        end_lineno = node.end_lineno or node.lineno
        if node.lineno <= lineno <= end_lineno and _callee_name(node) == func_name:
            by_name.append(node)

    if not by_name:
        return None
    # Innermost call wins when calls of the same name are nested
    return max(by_name, key=lambda n: (n.lineno, n.col_offset))


def _argument(node: ast.Call, index: int, name: str) -> ast.expr | None:
    if index < len(node.args) and not any(
        isinstance(a, ast.Starred) for a in node.args[: index + 1]
    ):
        return node.args[index]
    for keyword in node.keywords:
        if keyword.arg == name:
            return keyword.value
    return None


def _segment(source: str, node: ast.expr | None) -> str:
    if node is None:
        return UNKNOWN
    # A zero-argument lambda is described by the expression it wraps
    if isinstance(node, ast.Lambda) and not node.args.args:
        node = node.body
    segment = ast.get_source_segment(source, node)
    if segment is None:
        return UNKNOWN
    return " ".join(part.strip() for part in segment.splitlines())


def call_site(frame: FrameType, func_name: str, params: tuple[str, ...]) -> CallSite:
    """Describe the call to ``func_name`` currently executing in ``frame``.

    Returns the line where the call starts and the source text of each
    argument named in ``params``. Texts that cannot be recovered (no
    source, dynamic code, aliased callee) are reported as ``<unknown>``.
    """
    filename = frame.f_code.co_filename
    source = "".join(linecache.getlines(filename, frame.f_globals))
    tree = _parse(source) if source else None
    node = _find_call(tree, frame, func_name) if tree is not None else None
    if node is None:
        return CallSite(frame.f_lineno, [UNKNOWN] * len(params))
    texts = [
        _segment(source, _argument(node, i, name)) for i, name in enumerate(params)
    ]
    return CallSite(node.lineno, texts)
