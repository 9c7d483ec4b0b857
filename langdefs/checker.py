"""
Инструменты командной строки

Использование:
    # Сгенерировать TypeScript определения
    python -m langdefs.checker generate --dir langs/ --out langs.d.ts
    python -m langdefs.checker generate --dir langs/ --out langs.d.ts --header --placeholders

    # Проверка полноты переводов
    python -m langdefs.checker check --dir langs/
    python -m langdefs.checker check --dir langs/ --lang ru
"""

import argparse
import logging
import sys
from typing import Optional

from config import LOG_FORMAT
from .errors import LangError
from .loader import LanguageDocument, LanguageSet, Value, load_langs
from .shape import find_placeholders
from .typedefs import generate_typescript_defs


def collect_leaves(document: LanguageDocument, prefix: tuple = ()) -> list[tuple[tuple, Value]]:
    """
    Все листья документа: (путь из ключей, значение).

    Массивы считаются листьями, внутрь них не заходим.
    Путь хранится кортежем, поэтому {"a.b": ...} и {"a": {"b": ...}} различаются.
    """
    leaves = []
    for key, value in document.items():
        path = prefix + (key,)
        if isinstance(value, dict) and value:
            leaves.extend(collect_leaves(value, path))
        else:
            leaves.append((path, value))
    return leaves


def format_key(path: tuple) -> str:
    """('menu', 'title') -> 'menu.title'"""
    return ".".join(path)


def find_missing_keys(langs: LanguageSet) -> dict[str, list[str]]:
    """Для каждого языка: ключи, которые есть в других языках, но нет в нём."""
    lang_paths = {lang: {path for path, _ in collect_leaves(document)} for lang, document in langs.items()}
    all_paths = set().union(*lang_paths.values())
    return {lang: [format_key(p) for p in sorted(all_paths - paths)] for lang, paths in lang_paths.items()}


def find_placeholder_mismatches(langs: LanguageSet, base: str) -> list[dict]:
    """
    Сравнить плейсхолдеры каждого языка с базовым.

    Returns:
        [{'lang': ..., 'key': ..., 'expected': set, 'found': set}, ...]
    """
    base_leaves = dict(collect_leaves(langs.get(base, {})))
    errors = []

    for lang, document in langs.items():
        if lang == base:
            continue
        for path, text in collect_leaves(document):
            base_text = base_leaves.get(path)
            if not isinstance(text, str) or not isinstance(base_text, str):
                continue

            expected = set(find_placeholders(base_text))
            found = set(find_placeholders(text))
            if expected != found:
                errors.append({
                    'lang': lang,
                    'key': format_key(path),
                    'expected': expected,
                    'found': found,
                })

    return errors


def check_translations(langs: LanguageSet, lang: Optional[str] = None) -> bool:
    """
    Проверить полноту переводов

    Args:
        langs: загруженные языки
        lang: конкретный язык или None для всех

    Returns:
        True если все переводы полные
    """
    missing = find_missing_keys(langs)
    total = len({path for d in langs.values() for path, _ in collect_leaves(d)})
    all_ok = True

    print("\n=== Translation Status ===\n")

    languages = [lang] if lang else list(langs.keys())

    for check_lang in languages:
        if check_lang not in langs:
            print(f"  {check_lang}: Language not found!")
            all_ok = False
            continue

        lang_missing = missing[check_lang]
        translated = total - len(lang_missing)
        pct = (translated / total * 100) if total > 0 else 0

        if not lang_missing:
            status = "OK"
        else:
            status = f"MISSING {len(lang_missing)}"
            all_ok = False

        print(f"  {check_lang}: {translated}/{total} ({pct:.0f}%) - {status}")

        # Показать недостающие ключи
        if lang_missing and lang:
            print(f"\n  Missing keys for '{check_lang}':")
            for key in lang_missing[:20]:
                print(f"    - {key}")
            if len(lang_missing) > 20:
                print(f"    ... and {len(lang_missing) - 20} more")

    print()
    return all_ok


def check_placeholders(langs: LanguageSet, base: str) -> bool:
    """Проверить консистентность плейсхолдеров"""
    errors = find_placeholder_mismatches(langs, base)

    print(f"\n=== Placeholder Check (base: {base}) ===\n")

    for lang in langs:
        if lang == base:
            continue
        lang_errors = [e for e in errors if e['lang'] == lang]
        if lang_errors:
            print(f"  {lang}: {len(lang_errors)} placeholder errors")
            for err in lang_errors[:5]:
                print(f"    - {err['key']}: expected {sorted(err['expected'])}, found {sorted(err['found'])}")
            if len(lang_errors) > 5:
                print(f"    ... and {len(lang_errors) - 5} more")
        else:
            print(f"  {lang}: OK")

    print()
    return not errors


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Language files tools')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # generate
    gen_parser = subparsers.add_parser('generate', help='Generate TypeScript definitions')
    gen_parser.add_argument('--dir', required=True, help='Directory with language files')
    gen_parser.add_argument('--out', required=True, help='Output .d.ts file')
    gen_parser.add_argument('--header', action='store_true', help='Add "generated file" header')
    gen_parser.add_argument('--placeholders', action='store_true', help='Type {name} strings as functions')

    # check
    check_parser = subparsers.add_parser('check', help='Check translation completeness')
    check_parser.add_argument('--dir', required=True, help='Directory with language files')
    check_parser.add_argument('--lang', help='Specific language to check')
    check_parser.add_argument('--base', help='Reference language for placeholders (default: first)')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT
    )

    try:
        if args.command == 'generate':
            generate_typescript_defs(args.dir, args.out, with_header=args.header, placeholders=args.placeholders)
            print(f"\nGenerated {args.out}\n")
            return 0

        if args.command == 'check':
            langs = load_langs(args.dir)
            ok = check_translations(langs, args.lang)
            if langs:
                base = args.base or next(iter(langs))
                ok = check_placeholders(langs, base) and ok
            return 0 if ok else 1

    except LangError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
