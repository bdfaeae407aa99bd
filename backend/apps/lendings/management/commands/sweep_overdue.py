"""
Management command to mark overdue lending records.
Can be run from cron when Celery beat is not deployed.
"""
import logging

from django.core.management.base import BaseCommand

from apps.lendings.engine import LendingEngine
from apps.lendings.models import LendingRecord

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Mark lending records past their due date as OVERDUE'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='List overdue lendings without changing their status',
        )

    def handle(self, *args, **options):
        engine = LendingEngine()

        if options['dry_run']:
            self.stdout.write(self.style.WARNING('DRY RUN MODE - No changes will be made'))
            overdue = list(engine.find_overdue())
            pending = [record for record in overdue if record.status == LendingRecord.Status.BORROWED]
            for record in pending:
                self.stdout.write(
                    f'  [DRY RUN] Would mark lending #{record.pk} as OVERDUE '
                    f'(Book: {record.book.title}, Reader: {record.reader.email})'
                )
            self.stdout.write(f'Overdue lendings: {len(overdue)}, to transition: {len(pending)}')
            return

        before = set(
            engine.find_overdue().filter(
                status=LendingRecord.Status.BORROWED
            ).values_list('pk', flat=True)
        )
        overdue = engine.sweep_overdue()
        marked = [record for record in overdue if record.pk in before]

        for record in marked:
            self.stdout.write(
                self.style.SUCCESS(
                    f'  Marked lending #{record.pk} as OVERDUE '
                    f'(Book: {record.book.title}, Reader: {record.reader.email})'
                )
            )

        self.stdout.write('\n' + '=' * 60)
        self.stdout.write(self.style.SUCCESS('Summary:'))
        self.stdout.write(f'  Total overdue lendings: {len(overdue)}')
        self.stdout.write(self.style.SUCCESS(f'  Newly marked as overdue: {len(marked)}'))
        logger.info(f"sweep_overdue command marked {len(marked)} lending(s)")
