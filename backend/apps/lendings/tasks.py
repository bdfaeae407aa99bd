"""
Celery tasks for the lendings app.
"""
from celery import shared_task

from apps.lendings.engine import LendingEngine


@shared_task
def sweep_overdue_lendings():
    """
    Periodic overdue sweep.
    The same sweep also runs on every overdue read, so this task only keeps
    stored statuses fresh for plain list queries.
    """
    overdue = LendingEngine().sweep_overdue()
    return f"{len(overdue)} lending(s) overdue"
