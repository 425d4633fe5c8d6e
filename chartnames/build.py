import argparse, sys
from .build_vars import build_vars
from .helpers import get_derived_values
from .manifests import create_manifests, dump_manifests
from .lib.render_template import render_string
from .lib.yaml_tools import dump, load_existing_file, parse_bool_env_var
from .changelog import parse_changelog, render_changelog, add_release, build_release, find_release

DEBUG = parse_bool_env_var('DEBUG')

def add_chart_args(parser):
    parser.add_argument('release', help='release name')
    parser.add_argument('--chart', required=True, help='Chart.yaml, or a chart directory containing Chart.yaml and values.yaml')
    parser.add_argument('-f', '--values', action='append', help='values file, later files take precedence', type=str)
    parser.add_argument('--set', action='append', dest='set_pairs', help='value override (key.path=value)', type=str)

def load_vars(args):
    return build_vars(args.chart, args.release, args.values, args.set_pairs, debug=DEBUG)

def cmd_names(args):
    app = load_vars(args)
    return dump(get_derived_values(app.context))

def cmd_render(args):
    app = load_vars(args)
    source = load_existing_file(args.template)
    return render_string(source, app.context, app.values, chart_metadata=app.chart)

def cmd_manifests(args):
    app = load_vars(args)
    return dump_manifests(create_manifests(app.context, args.namespace))

def cmd_changelog_show(args):
    changelog = parse_changelog(load_existing_file(args.file))
    if args.release_version is not None:
        release = find_release(changelog, args.release_version)
        if release is None:
            raise ValueError(f"No release {args.release_version} in {args.file}")
        return dump(release.model_dump())
    return dump([r.model_dump() for r in changelog.releases])

def cmd_changelog_add(args):
    changelog = parse_changelog(load_existing_file(args.file))
    entry = build_release(args.release_version, args.date, args.entry or [])
    if find_release(changelog, entry.version) is not None and DEBUG:
        print(f"release {entry.version} already present in {args.file}", file=sys.stderr)
    rendered = render_changelog(add_release(changelog, entry))
    with open(args.file, 'w') as f:
        f.write(rendered)
    return None

def get_parser():
    parser = argparse.ArgumentParser(prog='chartnames')
    subparsers = parser.add_subparsers(dest='command', required=True)

    names = subparsers.add_parser('names', help='print derived names and labels')
    add_chart_args(names)
    names.set_defaults(func=cmd_names)

    render = subparsers.add_parser('render', help='render a manifest template with the naming helpers')
    render.add_argument('template', help='jinja2 template to render')
    add_chart_args(render)
    render.set_defaults(func=cmd_render)

    manifests = subparsers.add_parser('manifests', help='print the built-in manifests')
    add_chart_args(manifests)
    manifests.add_argument('-n', '--namespace', help='namespace to set on the manifests')
    manifests.set_defaults(func=cmd_manifests)

    changelog = subparsers.add_parser('changelog', help='read or extend a changelog')
    changelog_subparsers = changelog.add_subparsers(dest='changelog_command', required=True)

    show = changelog_subparsers.add_parser('show', help='print changelog releases as yaml')
    show.add_argument('file', help='changelog file')
    show.add_argument('--release', dest='release_version', help='only print this release')
    show.set_defaults(func=cmd_changelog_show)

    add = changelog_subparsers.add_parser('add', help='add a release to the top of a changelog')
    add.add_argument('file', help='changelog file')
    add.add_argument('--release-version', required=True, help='version of the new release')
    add.add_argument('--date', default='', help='release date')
    add.add_argument('-e', '--entry', action='append', help="entry as 'Category: text'", type=str)
    add.set_defaults(func=cmd_changelog_add)

    return parser

def main(argv=None):
    args = get_parser().parse_args(argv)
    output = args.func(args)
    if output is not None:
        print(output, end='')

def run():
    if DEBUG:
        main()
    else:
        try:
            main()
        # discard stack trace
        except Exception as e:
            print(f"{type(e).__name__}:", e, file=sys.stderr)
            sys.exit(1)

if __name__ == '__main__':
    run()
