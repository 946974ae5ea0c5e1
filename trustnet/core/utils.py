def to_float(x, default=None):
    """Parse ``x`` as float, ``default`` when it is not numeric ("inf" parses)."""
    try:
        return float(x)
    except (TypeError, ValueError):
        return default
