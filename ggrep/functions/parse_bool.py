def parse_bool(value, default=False):
    """Read an environment flag; anything outside 1/true/yes/on is false."""
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}
