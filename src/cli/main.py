"""Glossa CLI entry points.

This module exposes language detection commands over a profile
directory. It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Any, Sequence

from core.config import GlossaConfig
from core.constants import UNKNOWN_LANGUAGE_CODE
from core.errors import GlossaError, NoFeaturesError
from detection.facade import LanguageDetectionFacade
from transforms.language_detection import detect_language


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="glossa", description="Glossa language detection CLI")
    parser.add_argument("--profile-dir", help="Override GLOSSA_PROFILE_DIR for this command")
    parser.add_argument("--seed", type=int, help="Override GLOSSA_RANDOM_SEED for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_detect_command(subparsers)
    _add_languages_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Glossa CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        facade = _build_facade(args.profile_dir, args.seed)
        if args.command == "detect":
            return _run_detect_command(facade, args)
        if args.command == "languages":
            return _run_languages_command(facade)
    except GlossaError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_facade(profile_dir: str | None, seed: int | None) -> LanguageDetectionFacade:
    """Build detection facade with optional overrides.

    Args:
        profile_dir: Optional profile directory override.
        seed: Optional random seed override.

    Returns:
        Loaded detection facade.
    """
    config = GlossaConfig.from_env()
    if profile_dir:
        config = replace(config, profile_dir=Path(profile_dir).expanduser().resolve())
    if seed is not None:
        config = replace(config, random_seed=seed)
    return LanguageDetectionFacade.from_config(config)


def _run_detect_command(facade: LanguageDetectionFacade, args: argparse.Namespace) -> int:
    """Handle detect command.

    Args:
        facade: Loaded detection facade.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    for text in args.texts:
        if args.all:
            print(_format_ranked_languages(facade, text))
        else:
            print(detect_language(text, facade))
    return 0


def _format_ranked_languages(facade: LanguageDetectionFacade, text: str) -> str:
    """Render ranked probabilities for one text, or unknown without features."""
    try:
        ranked = facade.detect_with_probabilities(text)
    except NoFeaturesError:
        return UNKNOWN_LANGUAGE_CODE
    if not ranked:
        return UNKNOWN_LANGUAGE_CODE
    return " ".join(str(row) for row in ranked)


def _run_languages_command(facade: LanguageDetectionFacade) -> int:
    """Handle languages command."""
    for language in facade.languages:
        print(language)
    return 0


def _add_detect_command(subparsers: Any) -> None:
    """Register detect subcommand."""
    parser = subparsers.add_parser("detect", help="Detect the language of each text")
    parser.add_argument("texts", nargs="+", help="Texts to classify")
    parser.add_argument(
        "--all",
        action="store_true",
        help="Print every language above the threshold with its probability",
    )


def _add_languages_command(subparsers: Any) -> None:
    """Register languages subcommand."""
    subparsers.add_parser("languages", help="List languages of the loaded profiles")
