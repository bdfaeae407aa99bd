import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Category',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Name of the category', max_length=100, unique=True)),
                ('description', models.TextField(blank=True, help_text='Description of the category')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'category',
                'verbose_name_plural': 'categories',
                'db_table': 'categories',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Book',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('isbn', models.CharField(help_text='ISBN code for the book', max_length=20, unique=True, validators=[django.core.validators.MinLengthValidator(10)])),
                ('title', models.CharField(help_text='Title of the book', max_length=255, validators=[django.core.validators.MinLengthValidator(2)])),
                ('author', models.CharField(help_text='Author of the book', max_length=255, validators=[django.core.validators.MinLengthValidator(2)])),
                ('total_copies', models.PositiveIntegerField(default=1, help_text='Total number of copies owned by the library')),
                ('available_copies', models.PositiveIntegerField(default=1, help_text='Copies currently on the shelf and available for lending')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('category', models.ForeignKey(blank=True, help_text='Category of the book', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='books', to='books.category')),
            ],
            options={
                'verbose_name': 'book',
                'verbose_name_plural': 'books',
                'db_table': 'books',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['title'], name='books_title_idx'),
                    models.Index(fields=['author'], name='books_author_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(available_copies__lte=models.F('total_copies')), name='available_copies_within_total'),
                ],
            },
        ),
    ]
