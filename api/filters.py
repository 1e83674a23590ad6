from __future__ import annotations

import django_filters

from profiles.models import StudentProfile
from profiles.services import filter_by_query


class StudentProfileFilter(django_filters.FilterSet):
    """`?search=` applies the same matching rules as the HTML browser."""

    search = django_filters.CharFilter(method="filter_search", label="Name, email, preferred name or major")

    class Meta:
        model = StudentProfile
        fields = ["search"]

    def filter_search(self, queryset, name, value):
        return filter_by_query(queryset, value)
