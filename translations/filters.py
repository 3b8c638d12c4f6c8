# =============================================================================
# APP: translations - Filtres et tri des originaux
# =============================================================================

# translations/filters.py
from django.db.models import Exists, F, Max, OuterRef, Q
from django.db.models.functions import Length
from django_filters import rest_framework as filters

from api import options
from .models import Original, Translation

# Champs de recherche par portée
ORIGINAL_FIELDS = ('singular', 'plural')
TRANSLATION_FIELDS = tuple(f'translation_{i}' for i in range(6))
SCOPES = {
    'scope_originals': ORIGINAL_FIELDS,
    'scope_translations': TRANSLATION_FIELDS,
    'scope_context': ('context',),
    'scope_references': ('references',),
    'scope_both': ORIGINAL_FIELDS + TRANSLATION_FIELDS,
    'scope_any': ORIGINAL_FIELDS + TRANSLATION_FIELDS + ('context', 'references', 'comment'),
}


class OriginalFilter(filters.FilterSet):
    """
    Filtres pour les originaux d'un projet.

    Les données reçues sont déjà nettoyées : valeurs hors liste retirées.
    Les filtres liés aux traductions n'agissent que si un jeu est fourni.
    """
    filters_term = filters.CharFilter(method='filter_term', label='Terme recherché')
    filters_status = filters.MultipleChoiceFilter(
        choices=options.FILTER_STATUS_CHOICES, method='filter_status', label='Statut de traduction'
    )
    filters_options = filters.MultipleChoiceFilter(
        choices=options.FILTER_OPTION_CHOICES, method='filter_options', label='Options'
    )
    status = filters.ChoiceFilter(choices=Original.STATUS_CHOICES, label="Statut de l'original")

    class Meta:
        model = Original
        fields = ['status']

    def __init__(self, *args, translation_set=None, **kwargs):
        self.translation_set = translation_set
        super().__init__(*args, **kwargs)

    def _set_translations(self):
        return Translation.objects.filter(translation_set=self.translation_set, original=OuterRef('pk'))

    def filter_term(self, queryset, name, value):
        if not value:
            return queryset
        scope = self.data.get('filters_term_scope', options.DEFAULT_TERM_SCOPE)
        case_sensitive = self.data.get('filters_case_sensitive', False)
        lookup = 'contains' if case_sensitive else 'icontains'
        fields = SCOPES.get(scope, SCOPES[options.DEFAULT_TERM_SCOPE])

        condition = Q()
        for field in fields:
            if field in TRANSLATION_FIELDS:
                continue
            # Les références sont stockées en JSON : recherche insensible à la casse
            condition |= Q(**{f"{field}__{'icontains' if field == 'references' else lookup}": value})

        in_translations = [field for field in fields if field in TRANSLATION_FIELDS]
        if in_translations and self.translation_set is not None:
            match = Q()
            for field in in_translations:
                match |= Q(**{f'{field}__{lookup}': value})
            queryset = queryset.annotate(term_in_translations=Exists(self._set_translations().filter(match)))
            condition |= Q(term_in_translations=True)

        if not condition:
            return queryset.none()
        return queryset.filter(condition)

    def filter_status(self, queryset, name, value):
        if not value or self.translation_set is None:
            return queryset
        condition = Q()
        for status in value:
            alias = f'has_{status}'
            if status == 'untranslated':
                queryset = queryset.annotate(**{alias: Exists(
                    self._set_translations().filter(status__in=('current', 'waiting'))
                )})
                condition |= Q(**{alias: False})
            else:
                queryset = queryset.annotate(**{alias: Exists(self._set_translations().filter(status=status))})
                condition |= Q(**{alias: True})
        return queryset.filter(condition)

    def filter_options(self, queryset, name, value):
        for option in value or ():
            if option == 'with_comment':
                queryset = queryset.exclude(comment__isnull=True).exclude(comment='')
            elif option == 'with_context':
                queryset = queryset.exclude(context__isnull=True).exclude(context='')
            elif option == 'with_plural':
                queryset = queryset.exclude(plural__isnull=True).exclude(plural='')
            elif option == 'warnings' and self.translation_set is not None:
                queryset = queryset.filter(Exists(self._set_translations().exclude(warnings=[])))
        return queryset


def sort_originals(queryset, sort, translation_set=None):
    """Applique sort_by / sort_order ; les tris sur les traductions exigent un jeu"""
    by, how = sort['by'], sort['how']
    if by == 'random':
        return queryset.order_by('?')

    if by in ('translation_date_added', 'translation_date_modified', 'translation'):
        if translation_set is None:
            by = options.DEFAULT_SORT_BY
        else:
            set_filter = Q(translations__translation_set=translation_set)
            if by == 'translation':
                queryset = queryset.annotate(sort_key=Max('translations__translation_0', filter=set_filter))
            else:
                field = 'date_added' if by == 'translation_date_added' else 'date_modified'
                queryset = queryset.annotate(sort_key=Max(f'translations__{field}', filter=set_filter))
            by = 'sort_key'

    if by == 'length':
        queryset = queryset.annotate(sort_key=Length('singular'))
        by = 'sort_key'

    field = {
        'original_date_added': 'date_added',
        'original': 'singular',
        'priority': 'priority',
        'references': 'references',
        'sort_key': 'sort_key',
    }[by]
    expression = F(field).desc(nulls_last=True) if how == 'desc' else F(field).asc(nulls_last=True)
    tiebreak = '-id' if how == 'desc' else 'id'
    return queryset.order_by(expression, tiebreak)
