from ..models import NamingContext
from .models import *
from .name import get_name
from .chart import get_chart
from ..utils import trunc_name

def get_labels(ctx: NamingContext) -> dict[str, str]:
    labels = {
        CHART_LABEL_NAME: get_chart(ctx),
        PART_OF_LABEL_NAME: get_name(ctx),
        MANAGED_BY_LABEL_NAME: MANAGED_BY_VALUE,
    }
    if ctx.app_version:
        labels[VERSION_LABEL_NAME] = ctx.app_version
    return labels

def get_selector_labels(ctx: NamingContext) -> dict[str, str]:
    return {
        PART_OF_LABEL_NAME: get_name(ctx),
        INSTANCE_LABEL_NAME: trunc_name(ctx.release_name),
    }
