import os, sys
from types import SimpleNamespace
from .lib.yaml_tools import deep_merge, load_file as load_yaml_file, parse_set_pairs
from .models import ChartMetadata, ChartValues, NamingContext

CHART_FILE_NAME = 'Chart.yaml'
VALUES_FILE_NAME = 'values.yaml'

def resolve_chart_files(chart: str) -> tuple[str, str | None]:
    # a chart directory carries its own default values
    if os.path.isdir(chart):
        return os.path.join(chart, CHART_FILE_NAME), os.path.join(chart, VALUES_FILE_NAME)
    return chart, None

def merge_values(default_values_file: str | None, values_files: list[str] | None, set_pairs: list[str] | None) -> dict:
    values = {}
    if default_values_file is not None:
        values = load_yaml_file(default_values_file, assert_exists=False) or {}
    for fn in values_files or []:
        values = deep_merge(values, load_yaml_file(fn))
    values = deep_merge(values, parse_set_pairs(set_pairs))
    return values

def build_vars(chart: str, release_name: str, values_files: list[str] | None = None, set_pairs: list[str] | None = None, debug: bool = False):
    chart_file, default_values_file = resolve_chart_files(chart)
    chart_metadata = ChartMetadata.model_validate(load_yaml_file(chart_file))
    values = merge_values(default_values_file, values_files, set_pairs)
    chart_values = ChartValues.model_validate(values)
    context = NamingContext.from_chart(chart_metadata, chart_values, release_name)
    if debug:
        print(f"loaded chart {chart_metadata.name} {chart_metadata.version} from {chart_file}", file=sys.stderr)
    return SimpleNamespace(context=context, chart=chart_metadata, values=values)
