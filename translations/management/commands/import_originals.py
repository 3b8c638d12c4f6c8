# =============================================================================
# Commande Django pour importer des originaux depuis un fichier
# =============================================================================

from django.core.management.base import BaseCommand, CommandError

from projects.models import Project
from translations.importers import IMPORT_FORMATS, ImportParseError
from translations.services import import_originals_file


class Command(BaseCommand):
    help = "Importe les chaînes originales d'un fichier dans un projet"

    def add_arguments(self, parser):
        parser.add_argument('project_id', type=int, help='Identifiant du projet')
        parser.add_argument('path', help='Chemin du fichier à importer')
        parser.add_argument('--format', default='auto', choices=IMPORT_FORMATS, help='Format du fichier')

    def handle(self, *args, **options):
        try:
            project = Project.objects.get(pk=options['project_id'])
        except Project.DoesNotExist:
            raise CommandError(f"Projet {options['project_id']} introuvable.")

        self.stdout.write(f"Import de {options['path']} dans {project.path}...")
        try:
            counts = import_originals_file(project, options['path'], options['format'])
        except (ImportParseError, OSError) as e:
            raise CommandError(str(e))

        self.stdout.write(
            self.style.SUCCESS(
                f"Import terminé ! {counts['added']} ajoutés, {counts['existing']} existants, "
                f"{counts['fuzzied']} approximatifs, {counts['obsoleted']} obsolètes, {counts['error']} erreurs."
            )
        )
