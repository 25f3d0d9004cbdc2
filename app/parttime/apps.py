from django.apps import AppConfig


class ParttimeConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "parttime"
    verbose_name = "兼职"
