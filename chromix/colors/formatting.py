from .color import Color


def format_color(color: Color) -> str:
    """Render a Color as ``"(R,\\tG,\\tB,\\tA)"`` with unsigned integer channels."""
    return "({:d},\t{:d},\t{:d},\t{:d})".format(*color.value)
