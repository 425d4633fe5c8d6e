from ..helpers import (
    get_name,
    get_fullname,
    get_chart,
    get_labels,
    get_selector_labels,
    get_service_account_name,
)
from ..utils import trunc_name
from .yaml_tools import dump

def setup_helpers(env):
    env.globals['name'] = get_name
    env.globals['fullname'] = get_fullname
    env.globals['chart'] = get_chart
    env.globals['labels'] = get_labels
    env.globals['selector_labels'] = get_selector_labels
    env.globals['service_account_name'] = get_service_account_name
    env.filters['trunc_name'] = trunc_name
    env.filters['to_yaml'] = _to_yaml

def _to_yaml(value):
    return dump(value).rstrip('\n')

