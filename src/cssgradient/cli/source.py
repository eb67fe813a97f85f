from __future__ import annotations

import click


def read_css(css: str) -> str:
    """Return *css*, or standard input when it is ``-``."""
    if css == "-":
        return click.get_text_stream("stdin").read()
    return css


# Lets "-webkit-linear-gradient(...)" reach the CSS argument instead of being
# read as a cluster of short options.
CSS_ARGUMENT_SETTINGS = {"ignore_unknown_options": True}
