from ..models import NamingContext
from ..utils import trunc_name

def get_name(ctx: NamingContext) -> str:
    return trunc_name(ctx.name_override or ctx.chart_name)

def get_fullname(ctx: NamingContext) -> str:
    if ctx.fullname_override:
        return trunc_name(ctx.fullname_override)
    name = ctx.name_override or ctx.chart_name
    # releases named after the chart are not prefixed twice
    if name in ctx.release_name:
        return trunc_name(ctx.release_name)
    return trunc_name(f"{ctx.release_name}-{name}")
