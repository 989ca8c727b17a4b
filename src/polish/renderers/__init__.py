"""Polish renderers.

Renderers convert typed expression trees into text.

Available Renderers:
- PostfixRenderer: Renders an expression in Reverse Polish notation

Thread Safety:
All renderers use a StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from polish.renderers.postfix import PostfixRenderer
from polish.renderers.protocol import ExprRenderer

__all__ = ["ExprRenderer", "PostfixRenderer"]
