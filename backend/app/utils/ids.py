from uuid import uuid4


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:12]}"


def next_sequential_id(prefix: str, existing_ids, start: int) -> str:
    """``PREFIX<n>`` one past the highest numeric suffix already used under ``prefix``."""
    highest = start - 1
    for existing in existing_ids:
        if not existing.startswith(prefix):
            continue
        suffix = existing[len(prefix):]
        if suffix.isdigit():
            highest = max(highest, int(suffix))
    return f"{prefix}{highest + 1}"
