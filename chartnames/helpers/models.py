CHART_LABEL_NAME = 'helm.sh/chart'
PART_OF_LABEL_NAME = 'app.kubernetes.io/part-of'
MANAGED_BY_LABEL_NAME = 'app.kubernetes.io/managed-by'
VERSION_LABEL_NAME = 'app.kubernetes.io/version'
INSTANCE_LABEL_NAME = 'app.kubernetes.io/instance'

MANAGED_BY_VALUE = 'Helm'
DEFAULT_SERVICE_ACCOUNT_NAME = 'default'
