"""Resolve declensions for nouns from the command line.

    python -m scripts.resolve_nouns стол книга
    python -m scripts.resolve_nouns --difficulty common --json
"""
import argparse
import asyncio
import json
import sys

from core.config import get_settings
from core.logging import configure_logging, get_logger
from engines.declension import build_resolver
from ingest.clients import WiktionaryClient, create_http_client
from languages.russian.maps import CASES
from languages.russian.paradigm import NounMetadata
from languages.russian.vocab import DIFFICULTY_LEVELS, get_noun, nouns_by_difficulty

log = get_logger(__name__)


def format_table(declension) -> str:
    lines = [f"{declension.word} ({declension.gender or '?'}, {declension.animacy}) [{declension.origin}]"]
    for case in CASES:
        lines.append(f"  {case:<14} {declension.singular[case]:<18} {declension.plural[case]}")
    if declension.is_fallback:
        lines.append(f"  ! {declension.error or 'rule-based guess, verify before use'}")
    return "\n".join(lines)


async def main(words: list[str], difficulty: str | None, as_json: bool) -> int:
    settings = get_settings()

    if not words:
        words = [n.word for n in nouns_by_difficulty(difficulty or "common")]

    metadata = {}
    for word in words:
        entry = get_noun(word)
        metadata[word] = entry.metadata() if entry else NounMetadata()

    async with create_http_client(settings) as http:
        resolver = build_resolver(WiktionaryClient(http, settings), settings)
        declensions = await resolver.resolve_many(words, metadata)

    if as_json:
        print(json.dumps([d.to_dict() for d in declensions], ensure_ascii=False, indent=2))
    else:
        print("\n\n".join(format_table(d) for d in declensions))

    unresolved = [d.word for d in declensions if d.origin == "placeholder"]
    log.info("batch_done", words=len(declensions), unresolved=len(unresolved))
    return 1 if unresolved else 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Resolve Russian noun declensions")
    parser.add_argument("words", nargs="*", help="Nouns to resolve (default: the curated list)")
    parser.add_argument("--difficulty", "-d", choices=DIFFICULTY_LEVELS, help="Tier of the curated list to use when no words are given")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of tables")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    sys.exit(asyncio.run(main(args.words, args.difficulty, args.json)))
