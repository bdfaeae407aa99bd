from django.apps import AppConfig


class LendingsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.lendings'
    verbose_name = 'Lendings'
