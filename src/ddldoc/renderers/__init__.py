"""ddldoc renderers.

Renderers turn extracted protocol definitions into Markdown.

Available Renderers:
- DocumentAssembler: Complete protocol page
- MethodRenderer: One method section with Input/Output stubs
- ClassRenderer: One class section with its stub

Every render call builds its own StringBuilder; renderer instances only
hold configuration.

"""

from ddldoc.renderers.classes import ClassRenderer
from ddldoc.renderers.document import DocumentAssembler, render_protocol
from ddldoc.renderers.methods import MethodRenderer
from ddldoc.renderers.protocol import DocumentRenderer, RenderedFragment
from ddldoc.renderers.stub import render_stub

__all__ = [
    "ClassRenderer",
    "DocumentAssembler",
    "DocumentRenderer",
    "MethodRenderer",
    "RenderedFragment",
    "render_protocol",
    "render_stub",
]
