from django.apps import AppConfig


class EventboardConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "eventboard"
    verbose_name = "Event Board"
