#!/usr/bin/env python3
"""
Media Title Corrector - command line interface

Parses messy folder names into a clean search title, season and year, looks
the title up on TMDB and records the confirmed match with the correction
service.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from config import load_config
from correction import resolve_correction, create_correction_client_from_config
from logger import setup_logging, Colors
from model import SearchResult, SeasonEntry
from pattern import parse_season_from_title
from tmdb import create_tmdb_client_from_config

__version__ = '1.0.0'


def _format_result(index: int, result: SearchResult) -> str:
    date = result.release_date or '-'
    return f"  [{index}] {result.title} ({result.media_kind.value}, {date}, TMDB {result.id}, ★{result.vote_average:.1f})"


def _format_season(season: SeasonEntry) -> str:
    return f"  [{season.season_number}] {season.name} ({season.episode_count} episodes, {season.air_date or '-'})"


def prompt_for_season(seasons: List[SeasonEntry]) -> Optional[SeasonEntry]:
    """Ask the user to pick a season on the terminal"""
    print("Multiple seasons found:")
    for season in seasons:
        print(_format_season(season))

    by_number = {season.season_number: season for season in seasons}
    while True:
        answer = input("Season number (empty to skip): ").strip()
        if not answer:
            return None
        if answer.isdigit() and int(answer) in by_number:
            return by_number[int(answer)]
        print(f"{Colors.YELLOW}Unknown season: {answer}{Colors.RESET}")


def cmd_parse(args, logger) -> int:
    parsed = [parse_season_from_title(title) for title in args.titles]
    if args.json:
        print(json.dumps([p.to_dict() for p in parsed], ensure_ascii=False, indent=2))
        return 0

    for p in parsed:
        print(f"Input: \"{p.original_title}\"")
        print(f"  Clean Title: \"{p.clean_title}\"")
        print(f"  Season: {p.season_number}")
        print(f"  Year: {p.year}")
    return 0


def cmd_search(args, logger) -> int:
    config = load_config(args.config)
    client = create_tmdb_client_from_config(config, logger)

    parsed = parse_season_from_title(args.title)
    logger.info(f"Searching for '{parsed.clean_title}'")
    results = client.search(parsed.clean_title)
    if not results:
        print(f"{Colors.YELLOW}No results for '{parsed.clean_title}'{Colors.RESET}")
        return 1

    for i, result in enumerate(results):
        print(_format_result(i, result))
    return 0


def cmd_seasons(args, logger) -> int:
    config = load_config(args.config)
    client = create_tmdb_client_from_config(config, logger)

    seasons = client.get_seasons(args.tv_id, include_specials=args.specials)
    if not seasons:
        print(f"{Colors.YELLOW}No seasons found for TMDB {args.tv_id}{Colors.RESET}")
        return 1

    for season in seasons:
        print(_format_season(season))
    return 0


def cmd_correct(args, logger) -> int:
    config = load_config(args.config)
    tmdb_client = create_tmdb_client_from_config(config, logger)
    correction_client = create_correction_client_from_config(config, logger)

    parsed = parse_season_from_title(args.title or Path(args.folder).name)
    query = args.query or parsed.clean_title
    logger.info(f"Searching for '{query}' (season hint: {parsed.season_number})")

    results = tmdb_client.search(query)
    if not results:
        print(f"{Colors.YELLOW}No results for '{query}'{Colors.RESET}")
        return 1
    if args.pick >= len(results):
        print(f"{Colors.RED}--pick {args.pick} out of range, {len(results)} results:{Colors.RESET}")
        for i, result in enumerate(results):
            print(_format_result(i, result))
        return 1

    result = results[args.pick]
    season_hint = args.season if args.season is not None else parsed.season_number
    correction = resolve_correction(
        args.folder,
        result,
        tmdb_client,
        season_hint=season_hint,
        pick=None if args.no_input else prompt_for_season,
        logger=logger
    )

    if args.dry_run:
        print(json.dumps(correction.to_payload(), ensure_ascii=False, indent=2))
        return 0

    if not correction_client.submit(correction):
        return 1
    print(f"{Colors.GREEN}✓ Corrected: {correction.title}{Colors.RESET}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Media Title Corrector - clean folder names and match them on TMDB",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s parse "权力的游戏 第一季" "Movie_Title_2021"
  %(prog)s search "Breaking Bad S01"
  %(prog)s seasons 1396
  %(prog)s correct "/media/tv/绝命毒师 第二部" --dry-run
        """
    )
    parser.add_argument('--config', help='Path to config.yaml')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')
    parser.add_argument('--log-file', help='Also write logs to this file')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', required=True)

    p = subparsers.add_parser('parse', help='Parse titles and print season/year')
    p.add_argument('titles', nargs='+', help='Folder or file names')
    p.add_argument('--json', action='store_true', help='Print JSON')
    p.set_defaults(func=cmd_parse)

    p = subparsers.add_parser('search', help='Search TMDB with the cleaned title')
    p.add_argument('title', help='Folder or file name')
    p.set_defaults(func=cmd_search)

    p = subparsers.add_parser('seasons', help='List the seasons of a series')
    p.add_argument('tv_id', type=int, help='TMDB series ID')
    p.add_argument('--specials', action='store_true', help='Include season 0 (specials)')
    p.set_defaults(func=cmd_seasons)

    p = subparsers.add_parser('correct', help='Match a folder on TMDB and record the correction')
    p.add_argument('folder', help='Folder path to correct')
    p.add_argument('--title', help='Title to parse instead of the folder name')
    p.add_argument('--query', help='Search query instead of the cleaned title')
    p.add_argument('--pick', type=int, default=0, help='Index of the search result to use (default: 0)')
    p.add_argument('--season', type=int, help='Season number, overrides the parsed one')
    p.add_argument('--no-input', action='store_true', help='Never prompt for a season')
    p.add_argument('--dry-run', action='store_true', help='Print the correction instead of submitting it')
    p.set_defaults(func=cmd_correct)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_file, verbose=args.verbose)

    try:
        return args.func(args, logger)
    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW}Operation cancelled by user.{Colors.RESET}")
        return 1
    except (FileNotFoundError, ValueError) as e:
        print(f"\n{Colors.RED}Error: {e}{Colors.RESET}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
