import argparse
import logging
import sys

import yaml

from actions import calculate, generate_message
from exceptions import InviteError
from messages import conversion_rows, format_table
from models import LANGUAGES, MeetingSpec
from utils import CONFIG_PATH, Registry, city_label, config_to_dict, load_config, parse_participant_arg


def add_meeting_arguments(parser):
    parser.add_argument('--title', type=str, default='', help='Meeting title')
    parser.add_argument('--date', type=str, default='', help='Meeting date (YYYY-MM-DD)')
    parser.add_argument('--time', type=str, default='', help='Meeting time (HH:MM)')
    parser.add_argument('--base-timezone', type=str, default=None, help='Base timezone (e.g., America/Buenos_Aires)')
    parser.add_argument('--participant', action='append', default=[], metavar='NAME=ZONE',
                        help='Participant and timezone, repeatable (e.g., Ana=America/New_York)')
    parser.add_argument('--no-default-participants', action='store_true',
                        help='Ignore the participants listed in the config file')


def build_registry(args, config):
    """Seed a registry from config, then add the --participant entries in order."""
    registry = Registry() if args.no_default_participants else Registry.from_config(config.participants)
    for value in args.participant:
        name, timezone = parse_participant_arg(value)
        registry.add(name, timezone)
    return registry


def build_spec(args, config, language=None):
    return MeetingSpec(
        title=args.title,
        date=args.date,
        time=args.time,
        base_timezone=args.base_timezone or config.base_timezone,
        language=language or config.language,
    )


def main(argv=None):
    """Main entry point for the meeting invite CLI."""
    parser = argparse.ArgumentParser(description='Meeting time zone invite CLI')
    parser.add_argument('--config', type=str, default=CONFIG_PATH, help='YAML config file path')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command')

    # ===== Conversion Commands =====
    parser_convert = subparsers.add_parser('convert', help='Show the meeting time for each participant')
    add_meeting_arguments(parser_convert)

    parser_message = subparsers.add_parser('generate-message', help='Generate the invitation message')
    add_meeting_arguments(parser_message)
    parser_message.add_argument('--language', type=str, choices=LANGUAGES, default=None, help='Message language')
    parser_message.add_argument('--output', type=str, default=None, help='Also write the message to this file')

    # ===== Configuration Commands =====
    subparsers.add_parser('list-timezones', help='List the selectable timezones')
    subparsers.add_parser('show-config', help='Show the effective configuration')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config(args.config)

    try:
        # ===== Conversion Commands =====
        if args.command == 'convert':
            registry = build_registry(args, config)
            spec = build_spec(args, config)
            result = calculate(spec, registry)
            print(f"Hora base: {result.base_formatted} ({result.base_city})")
            print()
            print(format_table(conversion_rows(result)))
        elif args.command == 'generate-message':
            registry = build_registry(args, config)
            spec = build_spec(args, config, language=args.language)
            _, message = generate_message(spec, registry)
            print(message)
            if args.output:
                with open(args.output, 'w', encoding='utf-8') as f:
                    f.write(message + '\n')
                print(f"\nMessage saved to {args.output}", file=sys.stderr)

        # ===== Configuration Commands =====
        elif args.command == 'list-timezones':
            for tz in config.timezones:
                print(f"{tz}: {city_label(tz)}")
        elif args.command == 'show-config':
            print(yaml.safe_dump(config_to_dict(config), allow_unicode=True, sort_keys=False), end='')
    except InviteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
