from ..models import NamingContext
from ..utils import trunc_name
from .models import DEFAULT_SERVICE_ACCOUNT_NAME
from .name import get_fullname

def get_service_account_name(ctx: NamingContext) -> str:
    if ctx.service_account_name:
        return trunc_name(ctx.service_account_name)
    if ctx.service_account_create:
        return get_fullname(ctx)
    return DEFAULT_SERVICE_ACCOUNT_NAME
