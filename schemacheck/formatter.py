"""Render error trees as indented text."""

from typing import List, Optional, Sequence

from .errors import ErrorNode


def format_output(errors: Optional[Sequence[ErrorNode]], indent: str = "  ") -> str:
    """Format the result of ``check_schema`` one message per line.

    Children are printed below their parent, indented one level deeper.
    """
    lines: List[str] = []
    for root in errors or ():
        for depth, node in root.walk():
            if node.message:
                lines.append(f"{indent * depth}{node.message}")
    return "\n".join(lines)
