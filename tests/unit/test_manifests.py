"""Tests for manifest builders and jinja2 template rendering with the naming helpers."""

from __future__ import annotations

import pytest
import yaml
from jinja2 import UndefinedError

from chartnames.helpers import get_labels
from chartnames.lib.render_template import deduplicate_keys, render_string
from chartnames.manifests import (
    create_manifests,
    create_service_account_manifests,
    dump_manifests,
    get_resource_name,
    object_metadata,
)
from chartnames.models import NamingContext


def _make_ctx(**kwargs) -> NamingContext:
    defaults = {
        "chart_name": "aptos-validator",
        "chart_version": "1.2+3",
        "release_name": "myrelease",
        "app_version": "1.0",
    }
    defaults.update(kwargs)
    return NamingContext(**defaults)


class TestObjectMetadata:
    def test_named_after_fullname(self) -> None:
        meta = object_metadata(_make_ctx())
        assert meta.name == "myrelease-aptos-validator"
        assert meta.labels == get_labels(_make_ctx())
        assert meta.namespace is None

    def test_suffix(self) -> None:
        assert get_resource_name(_make_ctx(), "config") == "myrelease-aptos-validator-config"

    def test_suffix_truncated(self) -> None:
        name = get_resource_name(_make_ctx(fullname_override="f" * 60), "config")
        assert name == "f" * 60 + "-co"


class TestServiceAccountManifests:
    def test_created(self) -> None:
        manifests = create_service_account_manifests(_make_ctx(service_account_create=True), "validators")
        assert manifests == [
            {
                "apiVersion": "v1",
                "kind": "ServiceAccount",
                "metadata": {
                    "name": "myrelease-aptos-validator",
                    "namespace": "validators",
                    "labels": get_labels(_make_ctx()),
                },
            }
        ]

    def test_named_override(self) -> None:
        ctx = _make_ctx(service_account_create=True, service_account_name="validator-sa")
        manifests = create_service_account_manifests(ctx)
        assert manifests[0]["metadata"]["name"] == "validator-sa"
        assert "namespace" not in manifests[0]["metadata"]

    def test_not_created(self) -> None:
        assert create_service_account_manifests(_make_ctx(service_account_create=False)) == []
        assert create_manifests(_make_ctx(service_account_create=False)) == []

    def test_dump(self) -> None:
        dumped = dump_manifests(create_manifests(_make_ctx(service_account_create=True)))
        assert dumped.startswith("---\n")
        documents = list(yaml.safe_load_all(dumped))
        assert documents[0]["kind"] == "ServiceAccount"
        assert documents[0]["metadata"]["labels"]["app.kubernetes.io/version"] == "1.0"


_CONFIG_MAP_TEMPLATE = """\
apiVersion: v1
kind: ConfigMap
metadata:
  name: {{ fullname(ctx) }}-config
  labels:
    {{ labels(ctx) | to_yaml | indent(4) }}
data:
  chart: {{ chart(ctx) }}
  replicas: "{{ values.replicas }}"
  serviceAccount: {{ service_account_name(ctx) }}
"""


class TestRenderString:
    def test_helpers_available(self) -> None:
        ctx = _make_ctx(service_account_create=True)
        rendered = render_string(_CONFIG_MAP_TEMPLATE, ctx, {"replicas": 2})
        document = yaml.safe_load(rendered)
        assert document["metadata"]["name"] == "myrelease-aptos-validator-config"
        assert document["metadata"]["labels"] == get_labels(ctx)
        assert document["data"] == {
            "chart": "aptos-validator-1.2_3",
            "replicas": "2",
            "serviceAccount": "myrelease-aptos-validator",
        }

    def test_trunc_name_filter(self) -> None:
        rendered = render_string("name: {{ ('a' * 70) | trunc_name }}\n", _make_ctx())
        assert yaml.safe_load(rendered) == {"name": "a" * 63}

    def test_undefined_value_raises(self) -> None:
        with pytest.raises(UndefinedError):
            render_string("replicas: {{ values.replicas }}\n", _make_ctx(), {})

    def test_invalid_yaml_raises(self) -> None:
        with pytest.raises(yaml.YAMLError):
            render_string("a: [unclosed\n", _make_ctx())

    def test_empty_documents_dropped(self) -> None:
        assert deduplicate_keys("---\n---\nkind: A\n") == "---\nkind: A\n"

    def test_duplicate_keys_collapse(self) -> None:
        assert yaml.safe_load(deduplicate_keys("a: 1\na: 2\n")) == {"a": 2}
