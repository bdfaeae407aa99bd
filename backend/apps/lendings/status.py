"""
Status rule for lending records.
"""
from django.db import models
from django.utils.translation import gettext_lazy as _


class LendingStatus(models.TextChoices):
    BORROWED = 'BORROWED', _('Borrowed')
    OVERDUE = 'OVERDUE', _('Overdue')
    RETURNED = 'RETURNED', _('Returned')


OPEN_STATUSES = (LendingStatus.BORROWED, LendingStatus.OVERDUE)


def derive_status(returned_at, due_date, now):
    """
    Compute the status a lending record should have at ``now``.

    A returned record is RETURNED whatever its due date. An open record is
    OVERDUE strictly after its due date and BORROWED up to and including it.
    """
    if returned_at is not None:
        return LendingStatus.RETURNED
    if now > due_date:
        return LendingStatus.OVERDUE
    return LendingStatus.BORROWED
