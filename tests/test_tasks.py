import os
import time

import pytest
from django.core.management import CommandError, call_command

from translations.models import Original
from translations.tasks import cleanup_import_files
from .factories import ProjectFactory


def test_cleanup_removes_only_old_import_files(import_dir):
    import_dir.mkdir()
    old = import_dir / 'import-ancien.po'
    recent = import_dir / 'import-recent.po'
    other = import_dir / 'notes.txt'
    for path in (old, recent, other):
        path.write_text('contenu')
    two_days_ago = time.time() - 48 * 3600
    os.utime(old, (two_days_ago, two_days_ago))
    os.utime(other, (two_days_ago, two_days_ago))

    result = cleanup_import_files(max_age_hours=24)

    assert result == {'status': 'success', 'deleted_count': 1}
    assert not old.exists()
    assert recent.exists()
    assert other.exists()


def test_cleanup_without_import_dir():
    assert cleanup_import_files()['deleted_count'] == 0


@pytest.mark.django_db
def test_import_originals_command(tmp_path, capsys):
    project = ProjectFactory(slug='cli')
    path = tmp_path / 'fr.json'
    path.write_text('{"Hello": "Bonjour", "Bye": "Au revoir"}', encoding='utf-8')

    call_command('import_originals', str(project.pk), str(path))

    assert Original.objects.filter(project=project).count() == 2
    assert 'Import terminé' in capsys.readouterr().out


@pytest.mark.django_db
def test_import_originals_command_errors(tmp_path):
    project = ProjectFactory()
    broken = tmp_path / 'broken.json'
    broken.write_text('[1, 2', encoding='utf-8')

    with pytest.raises(CommandError):
        call_command('import_originals', '424242', str(broken))
    with pytest.raises(CommandError):
        call_command('import_originals', str(project.pk), str(broken))
