from django.apps import AppConfig


class MarkplusConfig(AppConfig):
    name = "markplus"
    verbose_name = "Markdown tags"
