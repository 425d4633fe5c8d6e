from jinja2 import Environment, FileSystemLoader, StrictUndefined
from .jinja2_extensions import setup_helpers
from .yaml_tools import dump_documents
import yaml, os

_jinja_env = None
def get_jinja():
    global _jinja_env
    if _jinja_env is None:
        templates_path = os.path.join(os.path.dirname(__file__), '..', 'templates')
        env = Environment(
            loader=FileSystemLoader(templates_path),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined)
        setup_helpers(env)
        _jinja_env = env
    return _jinja_env

def render_template(template: str, **kwargs):
    template_text = get_jinja().get_template(template)
    return template_text.render(**kwargs)

def deduplicate_keys(yaml_data: str) -> str:
    documents = [d for d in yaml.safe_load_all(yaml_data) if d is not None]
    return dump_documents(documents)

# render a manifest template supplied by the caller, e.g. a chart's deployment.yaml.jinja
def render_string(source: str, ctx, values: dict | None = None, **kwargs) -> str:
    template = get_jinja().from_string(source)
    rendered = template.render(ctx=ctx, values=values or {}, **kwargs)
    return deduplicate_keys(rendered)
