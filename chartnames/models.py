from pydantic import BaseModel, ConfigDict, Field, model_validator

def stringify(values, key):
    # yaml reads unquoted versions such as 1.0 as numbers
    if isinstance(values, dict) and key in values and values[key] is not None \
            and not isinstance(values[key], (str, bool, dict, list)):
        values[key] = str(values[key])
    return values

# Chart.yaml
class ChartMetadata(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    version: str
    app_version: str | None = Field(default=None, alias="appVersion")

    @model_validator(mode="before")
    @classmethod
    def preprocess(cls, values):
        stringify(values, 'version')
        stringify(values, 'appVersion')
        return values

class ServiceAccountValues(BaseModel):
    model_config = ConfigDict(extra="allow")

    create: bool = Field(default=True)
    name: str | None = None

# values.yaml, only the keys the naming helpers read
class ChartValues(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name_override: str | None = Field(default=None, alias="nameOverride")
    fullname_override: str | None = Field(default=None, alias="fullnameOverride")
    service_account: ServiceAccountValues = Field(default_factory=ServiceAccountValues, alias="serviceAccount")

    @model_validator(mode="before")
    @classmethod
    def preprocess(cls, values):
        stringify(values, 'nameOverride')
        stringify(values, 'fullnameOverride')
        # serviceAccount=null drops the block and falls back to defaults
        if isinstance(values, dict) and 'serviceAccount' in values and values['serviceAccount'] is None:
            values = {k: v for k, v in values.items() if k != 'serviceAccount'}
        return values

class NamingContext(BaseModel):
    """
    Everything the naming helpers read. Rebuilt for every render, never persisted.
    """
    model_config = ConfigDict(frozen=True)

    chart_name: str
    chart_version: str
    release_name: str
    name_override: str | None = None
    fullname_override: str | None = None
    service_account_name: str | None = None
    service_account_create: bool = Field(default=False)
    app_version: str | None = None

    @classmethod
    def from_chart(cls, chart: ChartMetadata, values: ChartValues, release_name: str) -> "NamingContext":
        return cls(
            chart_name=chart.name,
            chart_version=chart.version,
            app_version=chart.app_version,
            release_name=release_name,
            name_override=values.name_override,
            fullname_override=values.fullname_override,
            service_account_name=values.service_account.name,
            service_account_create=values.service_account.create,
        )

class ReleaseSection(BaseModel):
    category: str
    items: list[str] = Field(default_factory=list)

class ReleaseEntry(BaseModel):
    version: str
    date: str
    sections: list[ReleaseSection] = Field(default_factory=list)

    def heading(self) -> str:
        if self.date:
            return f"## [{self.version}] - {self.date}"
        return f"## [{self.version}]"

    def get_section(self, category: str) -> ReleaseSection | None:
        for section in self.sections:
            if section.category == category:
                return section
        return None

DEFAULT_CHANGELOG_PREAMBLE = '# Changelog'

class Changelog(BaseModel):
    preamble: str = Field(default=DEFAULT_CHANGELOG_PREAMBLE)
    releases: list[ReleaseEntry] = Field(default_factory=list)
    # link reference definitions, e.g. "[1.0.0]: https://..."
    links: list[str] = Field(default_factory=list)
