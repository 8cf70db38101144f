"""Shared test fixtures."""

from __future__ import annotations

import pytest

from dia2svg.engine.context import DiagramContext
from dia2svg.engine.pipeline import Pipeline, create_pipeline
from dia2svg.engine.registry import Layer
from dia2svg.diagram import parse_diagram


# Sample diagrams

BOX = """\
+--+
|  |
+--+
"""

ARROW = "---->\n"

ARROW_INTO_POINT = "---->o\n"

LEFT_ARROW = "<----\n"

STRAY_ASTERISK = "a*b\n"

UP_ARROW = """\
^
|
|
"""

DOWN_ARROW = """\
|
|
v
"""

BACK_DIAGONAL_DOWN_ARROW = """\
\\
 \\
  v
"""

DIAGONAL_UP_ARROW = """\
  ^
 /
/
"""

JUMP = """\
 |
-)-
 |
"""

CURVED_CORNER = """\
-.
  |
"""

LENS = """\
 .
(
 '
"""

UNDERSCORE = " ___ \n"

IDENTIFIER = "__init__\n"

SHADES = "░▒▓█\n"

FLOWCHART = """\
 .---.      +----+
 | A |----->| B  |  note: a-b
 '---'      +----+
   |          |
   v          o
   *    __FILE__
"""


def detect(text: str) -> DiagramContext:
    """Run the full pipeline over diagram text."""
    ctx = parse_diagram(text)
    create_pipeline().run(ctx)
    return ctx


def detect_strokes(text: str) -> DiagramContext:
    """Run only the stroke layer over diagram text."""
    ctx = parse_diagram(text)
    create_pipeline()
    Pipeline().run_layer(ctx, Layer.STROKES)
    return ctx


@pytest.fixture
def box_ctx() -> DiagramContext:
    return detect(BOX)


@pytest.fixture
def flowchart_ctx() -> DiagramContext:
    return detect(FLOWCHART)
