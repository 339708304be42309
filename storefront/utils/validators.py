def require_positive_int(v: int, name: str = "value") -> None:
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"{name} must be an integer")
    if v <= 0:
        raise ValueError(f"{name} must be > 0")


def require_item_id(v: str, name: str = "item_id") -> None:
    if not isinstance(v, str) or not v:
        raise ValueError(f"{name} must be a non-empty string")
