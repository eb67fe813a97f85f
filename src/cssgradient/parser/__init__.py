from cssgradient.errors import ParseError
from cssgradient.parser.arguments import split_comma_args, split_space_args
from cssgradient.parser.dimension import to_degrees, to_unit
from cssgradient.parser.gradient import gradient_kind, parse_gradient
from cssgradient.parser.tokenizer import stringify, tokenize

__all__ = [
    "ParseError",
    "parse_gradient",
    "gradient_kind",
    "tokenize",
    "stringify",
    "split_comma_args",
    "split_space_args",
    "to_unit",
    "to_degrees",
]
