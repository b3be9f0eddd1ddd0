from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from app.core.config import settings
from app.core.errors import ConfigurationError
from app.modules.flashcards.generator import generate_flashcards
from app.modules.generation.client import GenerationClient
from app.modules.generation.fallbacks import load_fallbacks
from app.modules.generation.models import GenerationResult
from app.modules.quiz.generator import generate_quiz


def _load_content(args: argparse.Namespace) -> str | None:
    if args.content and args.content_file:
        raise SystemExit("Provide either --content or --content-file, not both")
    if args.content_file:
        return Path(args.content_file).read_text(encoding="utf-8")
    return args.content


def _to_jsonable(kind: str, result: GenerationResult) -> dict:
    out: dict = {
        kind: [item.model_dump() for item in result.items],
        "degraded": result.degraded,
    }
    if result.note:
        out["note"] = result.note
    return out


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="study-gen", description="Quiz and flashcard generator CLI"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    q = sub.add_parser("quiz", help="Generate multiple-choice questions from text")
    q.add_argument("--content", "-c", help="Source text")
    q.add_argument("--content-file", help="Path to a file containing the source text")

    f = sub.add_parser("flashcards", help="Generate flashcards from text or a topic")
    f.add_argument("--content", "-c", help="Source text")
    f.add_argument("--content-file", help="Path to a file containing the source text")
    f.add_argument("--topic", "-t", help="Topic to use when no content is given")

    args = parser.parse_args(argv)
    content = _load_content(args)

    try:
        client = GenerationClient.from_settings(settings.gemini)
    except ConfigurationError as e:
        raise SystemExit(e.message)
    fallbacks = load_fallbacks(settings.generation.fallback_content_file)
    max_chars = settings.generation.max_content_chars

    if args.cmd == "quiz":
        if not content:
            raise SystemExit("--content or --content-file is required")
        result = asyncio.run(
            generate_quiz(content, client, fallbacks, max_chars=max_chars)
        )
    else:
        if not content and not args.topic:
            raise SystemExit("--content, --content-file or --topic is required")
        result = asyncio.run(
            generate_flashcards(
                client,
                fallbacks,
                content=content,
                topic=args.topic,
                max_chars=max_chars,
            )
        )

    print(json.dumps(_to_jsonable(args.cmd, result), indent=2))
    return 1 if result.degraded else 0


if __name__ == "__main__":
    raise SystemExit(main())
