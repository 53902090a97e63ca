"""Error handling for rendering.

- ErrorCode: kinds of render failure
- RenderError/RenderException: structured failure and its raisable form
- Result/Ok/Err: what every renderer returns
"""

from .errors import ErrorCode, RenderError, RenderException
from .result import Err, Ok, Result

__all__ = [
    "ErrorCode", "RenderError", "RenderException",
    "Result", "Ok", "Err",
]
