def fmt_g(val: float, places: int = 6) -> str:
    """Format a value with %g-style significant digits (e.g., 16.666667 -> '16.6667')."""
    return f"{val:.{places}g}"


def format_percent(val: float, places: int = 2, width: int = 0) -> str:
    """Format a float already in percent units (e.g., 30.103 -> '30.10%')."""
    return f"{val:{width}.{places}f}%"


def bar(pct: float, per_cell: float, glyph: str = "#") -> str:
    """Horizontal bar with one glyph per ``per_cell`` percent (truncated)."""
    if pct <= 0:
        return ""
    return glyph * int(pct / per_cell)
