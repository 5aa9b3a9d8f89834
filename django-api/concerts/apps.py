from django.apps import AppConfig


class ConcertsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "concerts"
