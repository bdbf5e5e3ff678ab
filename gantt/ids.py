def item_id(prefix: str, raw_id, seen: set) -> str:
    """
    Build a unique timeline id like "task-42". Records without an id fall back
    to "<prefix>-<n>"; collisions get a numeric suffix. Mutates `seen`.
    """
    base = f"{prefix}-{raw_id}" if raw_id not in (None, "") else f"{prefix}-{len(seen)}"
    out = base
    n = 2
    while out in seen:
        out = f"{base}~{n}"
        n += 1
    seen.add(out)
    return out
