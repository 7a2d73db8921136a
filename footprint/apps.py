from django.apps import AppConfig


class FootprintConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'footprint'
    verbose_name = 'Carbon Footprint'
