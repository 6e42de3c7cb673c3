from __future__ import annotations

import argparse
import sys
from pathlib import Path

from promptgen.core.errors import MissingPromptVariableError, PromptNotFoundError
from promptgen.observability.tracing import traced
from promptgen.prompts import DEFAULT_REGISTRY, render
from promptgen.schemas import GeneratorType, label_for


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Render a code generator prompt.')
    parser.add_argument('--key', choices=[g.value for g in GeneratorType])
    parser.add_argument('--dom-file', type=Path, default=None,
                        help='File with the captured DOM (default: stdin).')
    parser.add_argument('--url', default=None, help='Target page URL.')
    parser.add_argument('--strict', action='store_true', help='Fail on unresolved placeholders.')
    parser.add_argument('--list', action='store_true', help='List available prompts and exit.')
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for template in DEFAULT_REGISTRY:
            placeholders = ', '.join(template.placeholders)
            print(f'{template.key}\t{label_for(template.key)}\t{placeholders}')
        return 0

    if args.key is None:
        parser.error('--key is required unless --list is given')

    if args.dom_file is not None:
        dom_content = args.dom_file.read_text(encoding='utf-8')
    else:
        dom_content = sys.stdin.read()
    variables = {'domContent': dom_content}
    if args.url is not None:
        variables['pageUrl'] = args.url

    # Events go to stderr; stdout carries only the prompt.
    try:
        with traced('prompt.render', stream=sys.stderr, key=args.key, strict=args.strict):
            prompt = render(args.key, variables, strict=args.strict)
    except (PromptNotFoundError, MissingPromptVariableError) as exc:
        print(f'error: {exc}', file=sys.stderr)
        return 2

    print(prompt)
    return 0


if __name__ == '__main__':
    sys.exit(main())
