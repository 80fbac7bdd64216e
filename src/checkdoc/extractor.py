"""
Go declaration extraction using the tree-sitter Go grammar.
Yields each top-level func with the doc comment Go would attach to it.
"""
import logging
import re
from typing import List, Optional, Union

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from .errors import ParseError, TraversalError
from .models import Declaration

logger = logging.getLogger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())

FUNC_NODE_TYPES = ("function_declaration", "method_declaration")

# Tool directives (//go:build, //line f.go:10, //export F) are not doc text.
DIRECTIVE_RE = re.compile(r"^(line |extern |export |[a-z0-9]+:[a-z0-9])")


def _node_text(source: bytes, node: Node) -> str:
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def _first_error(node: Node) -> Optional[Node]:
    """Depth-first search for the first ERROR or MISSING node."""
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _raise_parse_error(source: bytes, filename: str, node: Node):
    row, column = node.start_point
    detail = _node_text(source, node).split("\n", 1)[0].strip()[:20] or None
    if node.is_missing:
        detail = f"missing {node.type}"
    raise ParseError(filename, row + 1, column + 1, detail)


def comment_text(comments: List[str]) -> str:
    """
    Joins raw comment tokens into doc text, mirroring go/ast CommentGroup.Text:
    markers stripped, directives dropped, blank runs collapsed.
    """
    lines: List[str] = []
    for c in comments:
        if c.startswith("//"):
            c = c[2:]
            if c.startswith(" "):
                c = c[1:]
            elif c and DIRECTIVE_RE.match(c):
                continue
        else:
            c = c[2:-2]
        for line in c.split("\n"):
            lines.append(line.rstrip())

    # Drop leading blank lines and collapse runs of blank lines.
    kept: List[str] = []
    for line in lines:
        if line or (kept and kept[-1]):
            kept.append(line)
    while kept and not kept[-1]:
        kept.pop()

    if not kept:
        return ""
    return "\n".join(kept) + "\n"


def _is_trailing(children: List[Node], index: int) -> bool:
    """True if the comment at `index` sits on the same line as preceding code."""
    row = children[index].start_point[0]
    k = index - 1
    while k >= 0 and children[k].type == "comment" and children[k].end_point[0] == row:
        row = children[k].start_point[0]
        k -= 1
    return k >= 0 and children[k].end_point[0] == row


def _doc_comments(source: bytes, children: List[Node], index: int) -> List[str]:
    """Collects the comment group ending on the line right above children[index]."""
    group: List[str] = []
    next_row = children[index].start_point[0]
    first = True
    j = index - 1
    while j >= 0:
        node = children[j]
        if node.type != "comment":
            break
        end_row = node.end_point[0]
        if first and end_row != next_row - 1:
            break
        if not first and end_row < next_row - 1:
            break
        if _is_trailing(children, j):
            break
        group.append(_node_text(source, node))
        next_row = node.start_point[0]
        first = False
        j -= 1
    group.reverse()
    return group


def parse_declarations(source: Union[bytes, str], filename: str = "<source>") -> List[Declaration]:
    """
    Parses Go source and returns its top-level function declarations.

    Args:
        source: File content
        filename: Name recorded on each Declaration and in errors

    Returns:
        Declarations in source order

    Raises:
        ParseError: If the source is not valid Go
    """
    if isinstance(source, str):
        source = source.encode("utf-8")

    tree = Parser(GO_LANGUAGE).parse(source)
    root = tree.root_node

    if root.has_error:
        error_node = _first_error(root)
        _raise_parse_error(source, filename, error_node or root)

    # Anonymous children are statement terminators ("\n", ";").
    children = [c for c in root.children if c.is_named]
    code = [c for c in children if c.type != "comment"]
    if not code or code[0].type != "package_clause":
        # go/parser rejects files without a package clause
        node = code[0] if code else root
        row, column = node.start_point
        raise ParseError(filename, row + 1, column + 1, "expected 'package'")

    seen_decl = False
    for node in code[1:]:
        if node.type != "import_declaration":
            seen_decl = True
        elif seen_decl:
            row, column = node.start_point
            raise ParseError(filename, row + 1, column + 1,
                             "imports must appear before other declarations")

    declarations: List[Declaration] = []
    for index, node in enumerate(children):
        if node.type not in FUNC_NODE_TYPES:
            continue
        name_node = node.child_by_field_name("name")
        if name_node is None:
            continue

        doc = comment_text(_doc_comments(source, children, index)) or None
        row, column = node.start_point
        declarations.append(
            Declaration(
                name=_node_text(source, name_node),
                doc=doc,
                source_file=filename,
                line=row + 1,
                column=column + 1,
            )
        )

    logger.debug(f"Parsed {len(declarations)} declarations from {filename}")
    return declarations


def extract_declarations(file_path: str) -> List[Declaration]:
    """
    Reads and parses one Go file.
    Raises TraversalError if the file cannot be read, ParseError if it does not parse.
    """
    try:
        with open(file_path, 'rb') as f:
            source = f.read()
    except OSError as e:
        raise TraversalError(file_path, e) from e

    return parse_declarations(source, file_path)
