from ..models import NamingContext
from ..utils import trunc_name

def get_chart(ctx: NamingContext) -> str:
    # '+' is not allowed in label values
    return trunc_name(f"{ctx.chart_name}-{ctx.chart_version}".replace('+', '_'))
