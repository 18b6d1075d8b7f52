"""
Translate commands.
"""

import sys
from lowkeese.cli import client


def add_subparser(subparsers):
    en_p = subparsers.add_parser("en2low", help="Translate English to Lowkeese")
    en_p.add_argument("text", help="English text")
    en_p.set_defaults(func=translate_forward)

    low_p = subparsers.add_parser("low2en", help="Translate Lowkeese to English")
    low_p.add_argument("text", help="Lowkeese text")
    low_p.set_defaults(func=translate_reverse)

    auto_p = subparsers.add_parser("auto", help="Detect the language, then translate")
    auto_p.add_argument("text", help="Text in either language")
    auto_p.set_defaults(func=translate_auto)


def translate_forward(args):
    try:
        print(client.translate("forward", args.text)["text"])
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def translate_reverse(args):
    try:
        print(client.translate("reverse", args.text)["text"])
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def translate_auto(args):
    try:
        result = client.translate("auto", args.text)
        print(f"[{result['label']}]")
        print(result["text"])
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
