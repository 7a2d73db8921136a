import django_filters

from .models import SpendEmissionEntry


class SpendEmissionEntryFilter(django_filters.FilterSet):
    category = django_filters.CharFilter(field_name='category', lookup_expr='icontains')
    created_after = django_filters.DateFilter(field_name='created_at', lookup_expr='date__gte')
    created_before = django_filters.DateFilter(field_name='created_at', lookup_expr='date__lte')

    class Meta:
        model = SpendEmissionEntry
        fields = ['category', 'created_after', 'created_before']
