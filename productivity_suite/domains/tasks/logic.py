"""Tasks domain - pure board ordering logic."""


def move_in_column(order: list[dict], task_id: str, column: str, position: int) -> list[str]:
    """
    Compute a new board order with one task moved inside its column.

    Args:
        order: Board as [{"id": ..., "status": ...}] in current order.
               The moved task must already carry its target status.
        task_id: Task to move
        column: Status column the task lives in
        position: Index among the column's tasks; clamped to the column size

    Returns:
        All task ids in their new order. Tasks in other columns keep their slots.
    """
    others = [item for item in order if item["id"] != task_id]
    column_ids = [item["id"] for item in others if item["status"] == column]
    position = max(0, min(position, len(column_ids)))

    ids = [item["id"] for item in others]
    if position < len(column_ids):
        insert_at = ids.index(column_ids[position])
    elif column_ids:
        insert_at = ids.index(column_ids[-1]) + 1
    else:
        insert_at = len(ids)

    ids.insert(insert_at, task_id)
    return ids
