def check_count(name: str, value) -> int:
    """Reject non-integer counts (k, limit) before they reach a slice."""
    # bool is an int subclass, but True is not a count
    if type(value) is not int:
        raise ValueError(f"{name} must be an integer: {value!r}")
    return value
