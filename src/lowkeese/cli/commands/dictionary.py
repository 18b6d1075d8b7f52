"""
Dictionary commands.
"""

import sys
from rich import print_json
from lowkeese.cli import client


def add_subparser(subparsers):
    teach_p = subparsers.add_parser("teach", help="Teach an English ↔ Lowkeese pair")
    teach_p.add_argument("english", help="English word or phrase")
    teach_p.add_argument("lowkeese", help="Lowkeese word or phrase")
    teach_p.set_defaults(func=dict_teach)

    dict_p = subparsers.add_parser("dict", help="Show the merged dictionary")
    dict_p.add_argument("direction", choices=["forward", "reverse"])
    dict_p.add_argument("--json", action="store_true", help="Print raw JSON")
    dict_p.set_defaults(func=dict_show)


def dict_teach(args):
    try:
        result = client.teach(args.english, args.lowkeese)
        if result["added"]:
            print(f"✓ Added: \"{args.english}\" ↔ \"{args.lowkeese}\"")
        else:
            print("Nothing to add.")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def dict_show(args):
    try:
        result = client.get_dictionary(args.direction)
        if args.json:
            print_json(data=result)
            return
        entries = result["entries"]
        if not entries:
            print("No entries.")
            return
        for key, value in sorted(entries.items()):
            print(f"{key:24} {value}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
