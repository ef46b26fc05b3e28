"""CLI for iconpack-reconciler."""

import argparse
import logging
import sys

from iconpack_reconciler.config import Settings
from iconpack_reconciler.domain.enums import MergeMode, ResourceType
from iconpack_reconciler.domain.models import MergeRequest
from iconpack_reconciler.errors import ResourceError
from iconpack_reconciler.operations.array_insert import insert_items_to_icon_pack
from iconpack_reconciler.operations.diff import diff_appfilters
from iconpack_reconciler.operations.merge import merge_appfilters, merge_appfilters_in_memory
from iconpack_reconciler.operations.missing_icons import find_missing_icons
from iconpack_reconciler.operations.sync import clean_icon_file_names, sync_icons_to_appfilter
from iconpack_reconciler.output.json_dumper import JSONDumper
from iconpack_reconciler.reader import read_resource_file


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='iconpack-reconciler',
        description='Diff, merge and sync Android icon-pack resource files',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--no-pretty', action='store_true', help='Disable pretty printing')
    subparsers = parser.add_subparsers(dest='command')

    diff_parser = subparsers.add_parser('diff', help='Compare two appfilter files')
    diff_parser.add_argument('first', help='First appfilter.xml')
    diff_parser.add_argument('second', help='Second appfilter.xml')
    diff_parser.add_argument('--report', help='Also write the diff JSON to this path')

    missing_parser = subparsers.add_parser('missing', help='List icons missing from an appfilter')
    missing_parser.add_argument('icon_dir', help='Directory of PNG icons')
    missing_parser.add_argument('appfilter', help='appfilter.xml')

    merge_parser = subparsers.add_parser('merge', help='Merge two appfilter files')
    merge_parser.add_argument('first', help='First appfilter.xml')
    merge_parser.add_argument('second', help='Second appfilter.xml')
    merge_parser.add_argument('--output', help='Output path (default: rewrite the target file)')
    merge_parser.add_argument(
        '--select', action='append', default=[], metavar='COMPONENT',
        help='Merge only this component (repeatable); default merges everything',
    )
    merge_parser.add_argument(
        '--into-second', action='store_true',
        help='Merge the first file into the second instead of the reverse',
    )
    merge_parser.add_argument(
        '--stdout', action='store_true',
        help='Print the merged document instead of writing a file',
    )

    insert_parser = subparsers.add_parser('insert', help='Insert drawables into an icon-pack string-array')
    insert_parser.add_argument('icon_pack', help='icon_pack.xml')
    insert_parser.add_argument('array', help='Name of the string-array')
    insert_parser.add_argument('items', nargs='+', help='Drawable names to insert')

    sync_parser = subparsers.add_parser('sync', help='Add placeholder items for unlisted icons')
    sync_parser.add_argument('icon_dir', help='Directory of PNG icons')
    sync_parser.add_argument('appfilter', help='appfilter.xml')

    clean_parser = subparsers.add_parser('clean-names', help='Copy icons with dot-free file names')
    clean_parser.add_argument('src_dir', help='Source icon directory')
    clean_parser.add_argument('dst_dir', help='Destination directory')

    read_parser = subparsers.add_parser('read', help='Parse one resource file and print it as JSON')
    read_parser.add_argument('file', help='XML file')
    read_parser.add_argument(
        '--type', choices=[t.value for t in ResourceType], default=ResourceType.APPFILTER.value,
        help='Document kind (default: appfilter)',
    )
    return parser


def _run(args: argparse.Namespace, settings: Settings, dumper: JSONDumper) -> None:
    if args.command == 'diff':
        result = diff_appfilters(args.first, args.second)
        data = result.to_dict()
        if args.report:
            dumper.write(args.report, data)
        print(dumper.dumps(data))

    elif args.command == 'missing':
        missing = find_missing_icons(args.icon_dir, args.appfilter)
        print(dumper.dumps({'missing_icons': missing, 'count': len(missing)}))

    elif args.command == 'merge':
        request = MergeRequest(
            first_file=args.first,
            second_file=args.second,
            output_file=args.output,
            mode=MergeMode.SELECTED if args.select else MergeMode.ALL,
            selected_components=args.select,
            merge_into_first=not args.into_second,
        )
        if args.stdout:
            result, content = merge_appfilters_in_memory(request, indent=settings.merge_indent)
            sys.stdout.write(content.decode('utf-8'))
        else:
            result = merge_appfilters(request, indent=settings.merge_indent)
            print(dumper.dumps(result.to_dict()))

    elif args.command == 'insert':
        inserted = insert_items_to_icon_pack(
            args.icon_pack, args.array, args.items, indent=settings.rewrite_indent,
        )
        print(dumper.dumps({'inserted': inserted, 'count': len(inserted)}))

    elif args.command == 'sync':
        result = sync_icons_to_appfilter(
            args.icon_dir, args.appfilter,
            renamed_dir_name=settings.renamed_dir_name,
            indent=settings.rewrite_indent,
        )
        print(dumper.dumps(result.to_dict()))

    elif args.command == 'clean-names':
        icons = clean_icon_file_names(args.src_dir, args.dst_dir)
        print(dumper.dumps([i.to_dict() for i in icons]))

    elif args.command == 'read':
        print(dumper.dumps(read_resource_file(args.file, ResourceType(args.type))))


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    settings = Settings.from_env()
    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s', stream=sys.stderr)

    try:
        _run(args, settings, JSONDumper(pretty=not args.no_pretty))
    except ResourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
