import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('translations', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Glossary',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('description', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('translation_set', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='glossary', to='translations.translationset')),
            ],
            options={
                'ordering': ['id'],
                'verbose_name_plural': 'glossaries',
            },
        ),
        migrations.CreateModel(
            name='GlossaryEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('term', models.CharField(max_length=255)),
                ('translation', models.CharField(max_length=255)),
                ('part_of_speech', models.CharField(blank=True, choices=[('noun', 'Nom'), ('verb', 'Verbe'), ('adjective', 'Adjectif'), ('adverb', 'Adverbe'), ('interjection', 'Interjection'), ('conjunction', 'Conjonction'), ('preposition', 'Préposition'), ('pronoun', 'Pronom'), ('expression', 'Expression'), ('abbreviation', 'Abréviation')], default='', max_length=20)),
                ('comment', models.TextField(blank=True, default='')),
                ('date_modified', models.DateTimeField(auto_now=True)),
                ('glossary', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to='glossaries.glossary')),
                ('last_edited_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['term', 'id'],
                'verbose_name_plural': 'glossary entries',
            },
        ),
    ]
