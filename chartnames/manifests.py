from typing import Any
from kubernetes import client
from .models import NamingContext
from .helpers import get_fullname, get_labels, get_service_account_name
from .utils import trunc_name
from .lib.yaml_tools import dump_documents

def get_resource_name(ctx: NamingContext, suffix: str | None = None) -> str:
    if suffix:
        return trunc_name(f"{get_fullname(ctx)}-{suffix}")
    return get_fullname(ctx)

def object_metadata(ctx: NamingContext, suffix: str | None = None, namespace: str | None = None, name: str | None = None) -> client.V1ObjectMeta:
    return client.V1ObjectMeta(
        name=name or get_resource_name(ctx, suffix),
        namespace=namespace,
        labels=get_labels(ctx),
    )

def create_service_account_manifests(ctx: NamingContext, namespace: str | None = None) -> list[dict[str, Any]]:
    if not ctx.service_account_create:
        return []
    service_account = client.V1ServiceAccount(
        api_version="v1",
        kind="ServiceAccount",
        metadata=object_metadata(ctx, namespace=namespace, name=get_service_account_name(ctx)),
    )
    return [client.ApiClient().sanitize_for_serialization(service_account)]

def create_manifests(ctx: NamingContext, namespace: str | None = None) -> list[dict[str, Any]]:
    manifests = []
    manifests += create_service_account_manifests(ctx, namespace)
    return manifests

def dump_manifests(manifests: list[dict[str, Any]]) -> str:
    return dump_documents(manifests)
