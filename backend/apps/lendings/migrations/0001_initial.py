import django.db.models.deletion
import django_fsm
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('books', '0001_initial'),
        ('readers', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='LendingRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('borrowed_at', models.DateTimeField(help_text='When the book was borrowed')),
                ('due_date', models.DateTimeField(help_text='When the book should be returned')),
                ('returned_at', models.DateTimeField(blank=True, help_text='When the book was returned', null=True)),
                ('status', django_fsm.FSMField(choices=[('BORROWED', 'Borrowed'), ('OVERDUE', 'Overdue'), ('RETURNED', 'Returned')], default='BORROWED', help_text='Current status of the lending record', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('book', models.ForeignKey(help_text='Book being lent', on_delete=django.db.models.deletion.PROTECT, related_name='lendings', to='books.book')),
                ('reader', models.ForeignKey(help_text='Reader who borrowed the book', on_delete=django.db.models.deletion.PROTECT, related_name='lendings', to='readers.reader')),
                ('lent_by', models.ForeignKey(blank=True, help_text='Staff member who issued the loan', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='lendings', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'lending record',
                'verbose_name_plural': 'lending records',
                'db_table': 'lending_records',
                'ordering': ['-borrowed_at'],
                'indexes': [
                    models.Index(fields=['reader', 'status'], name='lending_reader_status_idx'),
                    models.Index(fields=['book', 'status'], name='lending_book_status_idx'),
                    models.Index(fields=['due_date'], name='lending_due_date_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(
                        condition=(
                            models.Q(status='RETURNED', returned_at__isnull=False) |
                            models.Q(status__in=('BORROWED', 'OVERDUE'), returned_at__isnull=True)
                        ),
                        name='returned_status_matches_returned_at',
                    ),
                ],
            },
        ),
    ]
