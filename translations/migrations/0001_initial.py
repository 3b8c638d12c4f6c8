import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('projects', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='TranslationSet',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('slug', models.SlugField(max_length=255)),
                ('locale', models.CharField(db_index=True, max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='translation_sets', to='projects.project')),
            ],
            options={
                'ordering': ['project_id', 'locale', 'slug'],
                'unique_together': {('project', 'locale', 'slug')},
            },
        ),
        migrations.CreateModel(
            name='Original',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('context', models.CharField(blank=True, max_length=255, null=True)),
                ('singular', models.TextField()),
                ('plural', models.TextField(blank=True, null=True)),
                ('comment', models.TextField(blank=True, null=True)),
                ('references', models.JSONField(blank=True, default=list)),
                ('status', models.CharField(choices=[('+active', 'Active'), ('-obsolete', 'Obsolète')], db_index=True, default='+active', max_length=20)),
                ('priority', models.SmallIntegerField(choices=[(-2, 'Masquée'), (-1, 'Basse'), (0, 'Normale'), (1, 'Haute')], default=0)),
                ('date_added', models.DateTimeField(auto_now_add=True)),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='originals', to='projects.project')),
            ],
            options={
                'ordering': ['-priority', 'id'],
                'indexes': [models.Index(fields=['project', 'status'], name='translation_project_5b8e21_idx')],
            },
        ),
        migrations.CreateModel(
            name='Translation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('translation_0', models.TextField()),
                ('translation_1', models.TextField(blank=True, null=True)),
                ('translation_2', models.TextField(blank=True, null=True)),
                ('translation_3', models.TextField(blank=True, null=True)),
                ('translation_4', models.TextField(blank=True, null=True)),
                ('translation_5', models.TextField(blank=True, null=True)),
                ('status', models.CharField(choices=[('current', 'Actuelle'), ('waiting', 'En attente'), ('fuzzy', 'Approximative'), ('old', 'Ancienne')], db_index=True, default='waiting', max_length=20)),
                ('warnings', models.JSONField(blank=True, default=list)),
                ('date_added', models.DateTimeField(auto_now_add=True)),
                ('date_modified', models.DateTimeField(auto_now=True)),
                ('original', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='translations', to='translations.original')),
                ('translation_set', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='translations', to='translations.translationset')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='translations', to=settings.AUTH_USER_MODEL)),
                ('user_last_modified', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-date_modified', '-id'],
                'indexes': [
                    models.Index(fields=['original', 'translation_set', 'status'], name='translation_origina_3d0c4e_idx'),
                    models.Index(fields=['user', 'date_modified'], name='translation_user_id_9a7f12_idx'),
                ],
            },
        ),
    ]
