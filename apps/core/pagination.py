from django.core.paginator import EmptyPage, Paginator
from rest_framework.pagination import LimitOffsetPagination, PageNumberPagination
from rest_framework.response import Response


class TolerantPaginator(Paginator):
    """Paginator that serves pages past the end as empty pages."""

    def validate_number(self, number):
        try:
            return super().validate_number(number)
        except EmptyPage:
            number = int(number)
            if number < 1:
                raise
            return number

    def page(self, number):
        number = self.validate_number(number)
        if number > self.num_pages:
            return self._get_page([], number, self)
        return super().page(number)


class PagePagination(PageNumberPagination):
    """
    ``page`` / ``per_page`` pagination.

    Subclasses set ``results_key`` so the list is returned under a
    domain name, e.g. ``{"rentals": [...], "total": 3, "page": 1, "per_page": 20}``.
    A page past the end is empty and still reports the full ``total``.
    """
    django_paginator_class = TolerantPaginator
    page_size = 20
    page_size_query_param = 'per_page'
    max_page_size = 100
    results_key = 'results'

    def get_paginated_response(self, data):
        return Response({
            self.results_key: data,
            'total': self.page.paginator.count,
            'page': self.page.number,
            'per_page': self.page.paginator.per_page,
        })

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'properties': {
                self.results_key: schema,
                'total': {'type': 'integer', 'example': 42},
                'page': {'type': 'integer', 'example': 1},
                'per_page': {'type': 'integer', 'example': self.page_size},
            },
        }


class LimitPagination(LimitOffsetPagination):
    """``limit`` / ``offset`` pagination capped at 100 items."""
    default_limit = 20
    max_limit = 100
    results_key = 'results'

    def get_paginated_response(self, data):
        return Response({
            self.results_key: data,
            'total': self.count,
            'limit': self.limit,
            'offset': self.offset,
        })

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'properties': {
                self.results_key: schema,
                'total': {'type': 'integer', 'example': 42},
                'limit': {'type': 'integer', 'example': self.default_limit},
                'offset': {'type': 'integer', 'example': 0},
            },
        }
