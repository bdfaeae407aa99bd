from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Reader',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Full name of the reader', max_length=255)),
                ('email', models.EmailField(help_text='Contact email of the reader', max_length=254, unique=True)),
                ('phone', models.CharField(blank=True, help_text='Contact phone number', max_length=30)),
                ('address', models.TextField(blank=True, help_text='Postal address')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'reader',
                'verbose_name_plural': 'readers',
                'db_table': 'readers',
                'ordering': ['name'],
            },
        ),
    ]
