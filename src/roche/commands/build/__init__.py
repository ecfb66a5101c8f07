"""Image build commands.

Available commands:
    roche build      Build a development image
    roche test       Run the lib tests in an image
    roche release    Build a release image
"""

from .handlers import handle
from .parser import register_parser

__all__ = ["register_parser", "handle"]
