from __future__ import annotations

from towers.types import SelectionRecord

NOT_ENOUGH_BLOCKS = "Not enough blocks for a best set."


def format_stack(record: SelectionRecord) -> str | None:
    """Render ``[1, 4, 9]`` from the stack's face areas, or None for an empty stack."""

    if record.is_empty:
        return None
    return "[" + ", ".join(str(a) for a in record.face_areas) + "]"


def stack_line(label: str, record: SelectionRecord) -> tuple[str, bool]:
    rendered = format_stack(record)
    if rendered is None:
        return f"The {label} subset (left stack) is {NOT_ENOUGH_BLOCKS}", False
    return f"The {label} subset (left stack) is {rendered} = {record.height!r}", True
