from django.apps import AppConfig


class DeviTrainerConfig(AppConfig):
    name = "devi_trainer"
    verbose_name = "Shakuntala Devi trainer"

    def ready(self) -> None:
        from .tables import year_table

        # shared year table is built once at start-up
        year_table()
