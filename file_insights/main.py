"""
Smart File Insights - Command Line
==================================

Reads a provider file listing (JSON) and prints tags, groups, list views
or collection insights.
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from file_insights.actions import (
    NAME_PATTERN,
    ViewFilter,
    filter_view,
    format_file_size,
    merge_generated_tags,
    recent_files,
    suggest_name_for,
)
from file_insights.config import Config, NamingConvention, UserPreferences, YamlPreferencesStore
from file_insights.engine import (
    FileRecord,
    GroupClassifier,
    ImportanceScorer,
    InsightAnalyzer,
    InsightSummary,
    parse_timestamp,
)
from file_insights.utils.exceptions import ErrorCode, FileInsightsError, RecordError
from file_insights.utils.logging_config import LoggingConfig, Timer, get_logger, setup_logging

logger = get_logger(__name__)


def load_records(source: str, stdin: Optional[TextIO] = None) -> List[FileRecord]:
    """Read a JSON array of provider records.

    Entries with a ``key`` but no ``id`` are treated as design-tool files.

    Args:
        source: Path to a JSON file, or ``-`` for stdin.
        stdin: Stream used when ``source`` is ``-``.

    Returns:
        Parsed records in input order.

    Raises:
        RecordError: If the input is missing, not JSON, or not a list.
    """
    try:
        if source == "-":
            data = json.load(stdin or sys.stdin)
        else:
            with open(source, 'r', encoding='utf-8') as f:
                data = json.load(f)
    except FileNotFoundError as e:
        raise RecordError(
            f"Input file not found: {source}",
            source=source,
            error_code=ErrorCode.FILE_NOT_FOUND,
            cause=e,
        )
    except json.JSONDecodeError as e:
        raise RecordError(
            "Input is not valid JSON",
            source=source,
            error_code=ErrorCode.MALFORMED_JSON,
            cause=e,
        )

    if not isinstance(data, list):
        raise RecordError(
            f"Expected a JSON array of files, got {type(data).__name__}",
            source=source,
        )

    records = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping entry {index}: not an object")
            continue
        if "id" not in entry and "key" in entry:
            records.append(FileRecord.from_figma(entry))
        else:
            records.append(FileRecord.from_dict(entry))

    logger.info(f"Loaded {len(records)} files from {source}", extra={"record_count": len(records)})
    return records


class SmartFileInsights:
    """Wires configuration into the insight engine components."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize components.

        Args:
            config: Loaded configuration. Uses defaults if None.
        """
        self.config = config or Config()
        self.scorer = ImportanceScorer(self.config.scoring)
        self.classifier = GroupClassifier(self.scorer)
        self.analyzer = InsightAnalyzer(self.config.insights)
        self.preferences_store = YamlPreferencesStore(
            self.config.preferences.preferences_file,
            default=UserPreferences(self.config.preferences.convention),
        )

    def tag_report(self, files: List[FileRecord], now: datetime) -> List[Dict[str, Any]]:
        """Per-file tags and importance scores."""
        return [
            {
                "id": file.id,
                "name": file.name,
                "tags": merge_generated_tags(file),
                "importance": self.scorer.score(file, now),
            }
            for file in files
        ]

    def group_report(self, files: List[FileRecord], now: datetime) -> Dict[str, List[FileRecord]]:
        return self.classifier.classify(files, now)

    def view_report(self, files: List[FileRecord], view: ViewFilter) -> List[FileRecord]:
        """Most recent files for the list, narrowed to a view."""
        return filter_view(recent_files(files, self.config.views.list_limit), view)

    def insights(self, files: List[FileRecord]) -> InsightSummary:
        with Timer(logger, "analyze"):
            return self.analyzer.analyze(files)


def _print_tags(report: List[Dict[str, Any]]) -> None:
    print(f"\n🏷  Tags ({len(report)} files):\n")
    for entry in report:
        tags = ", ".join(entry["tags"]) or "-"
        print(f"  [{entry['importance']}] {entry['name']}")
        print(f"      {tags}")


def _print_groups(groups: Dict[str, List[FileRecord]]) -> None:
    print("\n📂 Groups:\n")
    for name, members in groups.items():
        print(f"  {name} ({len(members)})")
        for file in members:
            print(f"      {file.name}")


def _print_view(files: List[FileRecord], view: ViewFilter) -> None:
    print(f"\n📄 Recent files ({view.value}):\n")
    for file in files:
        modified = file.modified_at
        when = modified.date().isoformat() if modified else "unknown"
        print(f"  {file.name}  {format_file_size(file.size_bytes)}  {when}  {file.owner_name}")


def _print_insights(summary: InsightSummary) -> None:
    print("\n🕒 Recently Modified Files:\n")
    for file in summary.recent_files:
        print(f"  {file.name}")

    print("\n👥 Access Overview:\n")
    for owner, entry in summary.access_map.items():
        print(f"  {owner} ({len(entry.owned)} files)")
        for file in entry.owned[:3]:
            print(f"      {file.name}")
        if len(entry.owned) > 3:
            print(f"      +{len(entry.owned) - 3} more files")

    print("\n📑 Potential Duplicates:\n")
    if summary.duplicates:
        for name in summary.duplicates:
            print(f"  {name}")
    else:
        print("  No duplicate file names found")

    print("\n🔒 Security Insights:\n")
    count = len(summary.sensitive_files)
    if count:
        print(f"  Found {count} potentially sensitive {'file' if count == 1 else 'files'}")
        for file in summary.sensitive_files:
            print(f"      {file.name}")
    else:
        print("  No sensitive files detected")

    print("\n🗂  Suggested File Structure:\n")
    for category, subtypes in summary.folder_structure.items():
        print(f"  {category.capitalize()}s ({len(subtypes)} types)")
        for subtype, names in subtypes.items():
            print(f"      {subtype.capitalize()} ({len(names)} files)")


def _files_to_json(groups: Dict[str, List[FileRecord]]) -> Dict[str, Any]:
    return {name: [file.to_dict() for file in members] for name, members in groups.items()}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smart-file-insights",
        description="Heuristic tags, groups and insights for a cloud file listing",
    )
    parser.add_argument(
        'input',
        nargs='?',
        default='-',
        help='JSON array of file records (default: stdin)'
    )
    parser.add_argument(
        '--config', '-c',
        type=Path,
        help='Path to configuration file'
    )
    parser.add_argument(
        '--now',
        help='Current instant as ISO-8601 (default: the system clock)'
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        '--tags', '-t',
        action='store_true',
        help='Show generated tags and importance per file'
    )
    mode.add_argument(
        '--groups', '-g',
        action='store_true',
        help='Show files grouped by category'
    )
    mode.add_argument(
        '--view',
        choices=[v.value for v in ViewFilter],
        help='Show the recent file list narrowed to a view'
    )
    mode.add_argument(
        '--insights', '-i',
        action='store_true',
        help='Show collection insights (default)'
    )
    mode.add_argument(
        '--suggest-name',
        nargs=2,
        metavar=('TITLE', 'PROJECT'),
        help=f'Suggest a file name following {NAME_PATTERN}'
    )
    mode.add_argument(
        '--set-convention',
        choices=[c.value for c in NamingConvention],
        help='Save the preferred naming convention'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print JSON instead of text'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level'
    )
    parser.add_argument(
        '--log-json',
        action='store_true',
        help='Write console logs as JSON lines'
    )
    parser.add_argument(
        '--log-file',
        metavar='DIR',
        help='Also write JSON logs to a rotating file in DIR'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging_config = LoggingConfig(level=args.log_level, json_format=args.log_json)
    if args.log_file:
        logging_config.file_output = True
        logging_config.log_dir = Path(args.log_file).expanduser()
    setup_logging(logging_config)

    now = datetime.now(timezone.utc)
    if args.now:
        now = parse_timestamp(args.now)
        if now is None:
            parser.error(f"--now is not an ISO-8601 timestamp: {args.now}")

    try:
        app = SmartFileInsights(Config.load(args.config) if args.config else Config())

        if args.set_convention:
            app.preferences_store.save(UserPreferences(NamingConvention(args.set_convention)))
            print(f"✓ Naming convention set to {args.set_convention}")
            return 0

        if args.suggest_name:
            title, project = args.suggest_name
            prefs = app.preferences_store.load()
            print(suggest_name_for(title, project, prefs, now.date()))
            return 0

        files = load_records(args.input)

        if args.tags:
            report = app.tag_report(files, now)
            if args.json:
                print(json.dumps(report, indent=2))
            else:
                _print_tags(report)
        elif args.groups:
            groups = app.group_report(files, now)
            if args.json:
                print(json.dumps(_files_to_json(groups), indent=2))
            else:
                _print_groups(groups)
        elif args.view:
            view = ViewFilter(args.view)
            listed = app.view_report(files, view)
            if args.json:
                print(json.dumps([file.to_dict() for file in listed], indent=2))
            else:
                _print_view(listed, view)
        else:
            summary = app.insights(files)
            if args.json:
                print(json.dumps(summary.to_dict(), indent=2))
            else:
                _print_insights(summary)

    except FileInsightsError as e:
        logger.error(str(e))
        print(f"✗ {e.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
