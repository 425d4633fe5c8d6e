"""
chartnames - chart naming/labeling helpers and changelog tooling

Derives resource names and labels from a chart's identity the same way a
chart's _helpers.tpl does, so they can be reused by python manifest
generators and jinja2 templates.
"""

from .models import NamingContext, ChartMetadata, ChartValues, ReleaseEntry, ReleaseSection, Changelog
from .helpers import (
    get_name,
    get_fullname,
    get_chart,
    get_labels,
    get_selector_labels,
    get_service_account_name,
    get_derived_values,
)
from .utils import trunc_name
from .changelog import parse_changelog, render_changelog, add_release, find_release, ChangelogError

__all__ = [
    'NamingContext', 'ChartMetadata', 'ChartValues', 'ReleaseEntry', 'ReleaseSection', 'Changelog',
    'get_name', 'get_fullname', 'get_chart', 'get_labels', 'get_selector_labels',
    'get_service_account_name', 'get_derived_values', 'trunc_name',
    'parse_changelog', 'render_changelog', 'add_release', 'find_release', 'ChangelogError',
]
