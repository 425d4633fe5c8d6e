import yaml, os
from typing import Any

def represent_none(dumper, _):
    return dumper.represent_scalar('tag:yaml.org,2002:null', '')

def _represent_str(dumper, data):
    """
        dump multiline strings (changelog bullets, rendered notes) as block scalars

        Trailing newlines are not stripped, so strings that have them fall back to the default style.
    """
    if data.count('\n') > 0:
        return dumper.represent_scalar('tag:yaml.org,2002:str', data, style='|')
    return dumper.represent_scalar('tag:yaml.org,2002:str', data)

class NoAliasDumper(yaml.SafeDumper):
    def ignore_aliases(self, data):
        return True

NoAliasDumper.add_representer(type(None), represent_none)
NoAliasDumper.add_representer(str, _represent_str)

def dump(data) -> str:
    return yaml.dump(data, default_flow_style=False, sort_keys=False, Dumper=NoAliasDumper)

def dump_documents(documents: list[Any]) -> str:
    output = ''
    for document in documents:
        output += '---\n'
        output += dump(document)
    return output

def unflatten(obj, sep: str = ".", conflict="error") -> Any:
    if conflict not in ["ignore", "overwrite", "error"]:
        raise ValueError("Unexpected conflict resolution:" + conflict)

    if not isinstance(obj, dict):
        return obj

    result = {}
    for key, value in obj.items():
        value = unflatten(value, sep, conflict)
        if not isinstance(key, str):
            result[key] = value
            continue

        parts = key.split(sep)
        current = result
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            elif not isinstance(current[part], dict):
                if conflict == "error":
                    raise ValueError(f"Conflict at {'.'.join(parts[:-1])}")
                elif conflict == "overwrite":
                    current[part] = {}
                elif conflict == "ignore":
                    current = None
                    break
            current = current[part]
        if current is not None:
            leaf = parts[-1]
            if leaf in current:
                if conflict == "error":
                    raise ValueError(f"Conflict at {key}")
                elif conflict == "overwrite":
                    current[leaf] = value
                elif conflict == "ignore":
                    continue
            else:
                current[leaf] = value
    return result

def load_existing_file(fn):
    if os.path.isfile(fn):
        with open(fn, 'r') as f:
            return f.read()
    raise ValueError(f"Could not find file {fn}")

def load_file(fn, assert_exists: bool=True) -> Any:
    if not os.path.isfile(fn):
        if assert_exists:
            raise ValueError(f"Could not find file {fn}")
        return None

    with open(fn, 'r') as f:
        data = yaml.safe_load(f)
    # an empty values file is valid
    if data is None:
        return {}
    return data

# deep merge two dictionaries created from yaml
# values from d2 win; lists and scalars are replaced, dicts are merged key by key
def deep_merge(d1, d2):
    result = d1.copy()
    for k, v in d2.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)
            continue
        result[k] = v
    return result

def parse_scalar(value: str) -> str | bool | None:
    lowered = value.strip().lower()
    if lowered == 'true':
        return True
    if lowered == 'false':
        return False
    if lowered in ('null', '~'):
        return None
    return value

# turn ["a.b=c", ...] into {"a": {"b": "c"}}
def parse_set_pairs(pairs: list[str] | None) -> dict[str, Any]:
    flat = {}
    for pair in pairs or []:
        if '=' not in pair:
            raise ValueError(f"Invalid --set value, expected key=value: {pair}")
        key, value = pair.split('=', 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid --set value, empty key: {pair}")
        flat[key] = parse_scalar(value)
    return unflatten(flat, conflict="overwrite")

def parse_bool_env_var(var_name, default=False):
    value = os.getenv(var_name)
    if value is not None:
        value_str = str(value).lower()
        return value_str in ('true', '1') or \
               (value_str.isdigit() and int(value_str) != 0)
    return default
