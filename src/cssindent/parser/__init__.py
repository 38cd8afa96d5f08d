from cssindent.parser.builder import parse_stylesheet
from cssindent.parser.errors import ParseError

__all__ = ["parse_stylesheet", "ParseError"]
