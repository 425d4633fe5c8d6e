"""
Naming helpers - derive resource names and labels from a NamingContext

Python counterparts of a chart's _helpers.tpl defines. All of them are pure.
"""

from .models import *
from .name import get_name, get_fullname
from .chart import get_chart
from .labels import get_labels, get_selector_labels
from .service_account import get_service_account_name
from ..models import NamingContext


def get_derived_values(ctx: NamingContext) -> dict:
    return {
        'name': get_name(ctx),
        'fullname': get_fullname(ctx),
        'chart': get_chart(ctx),
        'labels': get_labels(ctx),
        'selectorLabels': get_selector_labels(ctx),
        'serviceAccountName': get_service_account_name(ctx),
    }

__all__ = [
    'get_name',
    'get_fullname',
    'get_chart',
    'get_labels',
    'get_selector_labels',
    'get_service_account_name',
    'get_derived_values',
]
