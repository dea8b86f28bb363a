from django.apps import AppConfig


class CompilerConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'compiler'

    def ready(self):
        """Build the shared pattern registry once, at start-up."""
        import compiler.markdown.patterns  # noqa: F401 - Compile static patterns
