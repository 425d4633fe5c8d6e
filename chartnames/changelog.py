"""
Changelog reading and writing

The document follows the usual heading convention:

    ## [version] - date
    ### Category
    - bullet

Anything above the first release heading is kept verbatim as the preamble.
"""

import re
from .models import Changelog, ReleaseEntry, ReleaseSection
from .lib.render_template import render_template

RELEASE_PATTERN = re.compile(r"^##\s+\[([^\]]+)\](?:\s+-\s+(.+?))?\s*$")
SECTION_PATTERN = re.compile(r"^###\s+(.+?)\s*$")
BULLET_PATTERN = re.compile(r"^[-*]\s+(.*?)\s*$")
LINK_PATTERN = re.compile(r"^\[[^\]]+\]:\s*\S+")
HEADING_PATTERN = re.compile(r"^#{2,}(\s|\[|$)")
INVALID_VERSION_PATTERN = re.compile(r"[\[\]]")

class ChangelogError(ValueError):
    def __init__(self, line_number: int, line: str, reason: str):
        super().__init__(f"line {line_number}: {reason}: {line!r}")
        self.line_number = line_number
        self.line = line

def parse_changelog(text: str) -> Changelog:
    preamble: list[str] = []
    releases: list[ReleaseEntry] = []
    links: list[str] = []
    release: ReleaseEntry | None = None
    section: ReleaseSection | None = None
    in_bullet = False

    for i, line in enumerate(text.splitlines(), start=1):
        if LINK_PATTERN.match(line):
            links.append(line.strip())
            in_bullet = False
            continue

        rm = RELEASE_PATTERN.match(line)
        if rm:
            version, date = rm.groups()
            release = ReleaseEntry(version=version.strip(), date=(date or '').strip())
            releases.append(release)
            section = None
            in_bullet = False
            continue

        if release is None:
            # headings and bullets only belong under a release
            if HEADING_PATTERN.match(line) or BULLET_PATTERN.match(line):
                raise ChangelogError(i, line, "malformed heading or bullet before the first release")
            preamble.append(line)
            continue

        if not line.strip():
            in_bullet = False
            continue

        sm = SECTION_PATTERN.match(line)
        if sm:
            section = ReleaseSection(category=sm.group(1))
            release.sections.append(section)
            in_bullet = False
            continue

        bm = BULLET_PATTERN.match(line)
        if bm:
            if section is None:
                raise ChangelogError(i, line, "bullet outside of a category")
            section.items.append(bm.group(1))
            in_bullet = True
            continue

        # indented lines continue the previous bullet
        if in_bullet and line[0].isspace() and section is not None:
            section.items[-1] += '\n' + line.rstrip()
            continue

        raise ChangelogError(i, line, "unexpected line")

    return Changelog(
        preamble='\n'.join(preamble).strip(),
        releases=releases,
        links=links)

def render_changelog(changelog: Changelog) -> str:
    rendered = render_template('changelog.md.jinja', changelog=changelog)
    return rendered.rstrip('\n') + '\n'

# newest release first, version uniqueness is not checked
def add_release(changelog: Changelog, entry: ReleaseEntry) -> Changelog:
    return changelog.model_copy(update={'releases': [entry] + list(changelog.releases)})

def find_release(changelog: Changelog, version: str) -> ReleaseEntry | None:
    for release in changelog.releases:
        if release.version == version:
            return release
    return None

# "Category: text" pairs from the command line, grouped in first-seen order
def build_release(version: str, date: str, entries: list[str]) -> ReleaseEntry:
    version, date = version.strip(), date.strip()
    if not version or INVALID_VERSION_PATTERN.search(version):
        raise ValueError(f"Invalid release version: {version!r}")
    sections: dict[str, ReleaseSection] = {}
    for entry in entries:
        if ':' not in entry:
            raise ValueError(f"Invalid entry, expected 'Category: text': {entry}")
        category, item = entry.split(':', 1)
        category, item = category.strip(), item.strip()
        if not category or not item:
            raise ValueError(f"Invalid entry, expected 'Category: text': {entry}")
        sections.setdefault(category, ReleaseSection(category=category)).items.append(item)
    return ReleaseEntry(version=version, date=date, sections=list(sections.values()))
