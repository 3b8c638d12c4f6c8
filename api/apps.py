from django.apps import AppConfig, apps


class ApiConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'api'
    verbose_name = 'API REST'

    def ready(self):
        # Les serializers s'enregistrent à l'import ; on fige ensuite le registre
        from .schemas import registry

        for config in apps.get_app_configs():
            if config.name == self.name:
                continue
            try:
                __import__(f'{config.name}.serializers')
            except ModuleNotFoundError as e:
                if e.name != f'{config.name}.serializers':
                    raise
        registry.freeze()
