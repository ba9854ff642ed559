#!/usr/bin/env python3
"""
Command-line and interactive entry point.

Resolves identifiers given as arguments, or prompts for them one at a time
with recall of earlier entries:

    citation-tools 10.1038/nature12373 arxiv:2008.06030
    citation-tools            # interactive: h = history, q = quit, !n = recall
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional, Sequence, Tuple

from citation_tools.config.manager import ConfigManager
from citation_tools.metadata.resolver import CitationResolver
from citation_tools.models.citation import ResolutionFailure, ResolutionResult
from citation_tools.utils.history import append_history, load_history, save_history
from citation_tools.utils.identifier_validator import classify, normalize

PROMPT = "Identifier (h=history, q=quit): "

FAILURE_MESSAGES = {
    ResolutionFailure.NO_MATCH: "not a recognized ISBN, ISSN, DOI, PMID, PMCID or arXiv ID",
    ResolutionFailure.NO_PATH: "no lookup available for this identifier type",
    ResolutionFailure.NO_MAPPING: "no DOI found for this PubMed identifier",
    ResolutionFailure.FETCH_FAILURE: "lookup failed (network error or no record)",
}


def setup_logging(debug: bool = False):
    """Set up logging configuration"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def describe_failure(result: ResolutionResult) -> str:
    """Short user-facing reason for an unresolved identifier."""
    message = FAILURE_MESSAGES.get(result.failure, "no citation found")
    return f"{result.raw}: {message}"


def recall(history: Sequence[str], entry: str) -> Optional[str]:
    """Expand history references.

    Empty input and '!!' recall the last entry, '!n' recalls entry n
    (1-based, as listed by show_history). Anything else is returned as-is.

    Returns:
        The identifier to resolve, or None if the reference is invalid
    """
    entry = entry.strip()
    if entry in ('', '!!'):
        return history[-1] if history else None
    if entry.startswith('!'):
        try:
            index = int(entry[1:])
        except ValueError:
            return None
        if 1 <= index <= len(history):
            return history[index - 1]
        return None
    return entry


def show_history(history: Sequence[str], output: Callable[[str], None] = print):
    if not history:
        output("  (history is empty)")
        return
    for i, entry in enumerate(history, 1):
        output(f"  {i:3d}. {entry}")


def process_entry(resolver: CitationResolver, history: Sequence[str], entry: str,
                  output: Callable[[str], None] = print) -> Tuple[Optional[str], List[str]]:
    """Resolve one entry typed at the prompt.

    Returns:
        (citation text or None, new history)
    """
    raw = recall(history, entry)
    if raw is None:
        output("Nothing to recall.")
        return None, list(history)

    history = append_history(history, raw)
    result = resolver.resolve(raw)
    if result.citation is None:
        output(describe_failure(result))
        return None, history

    output(result.citation)
    return result.citation, history


def lookup_interactive(resolver: CitationResolver, history: Sequence[str],
                       input_func: Optional[Callable[[str], str]] = None,
                       output: Callable[[str], None] = print) -> Tuple[Optional[str], List[str]]:
    """Prompt for one identifier and resolve it.

    Args:
        resolver: Resolver to use
        history: Earlier entries, oldest first
        input_func: Prompt function (input by default)
        output: Where messages go (print by default)

    Returns:
        (citation text or None, new history including the entry)
    """
    input_func = input_func or input
    return process_entry(resolver, history, input_func(PROMPT), output)


def run_interactive(resolver: CitationResolver, history: Sequence[str],
                    input_func: Optional[Callable[[str], str]] = None,
                    output: Callable[[str], None] = print) -> List[str]:
    """Prompt until 'q', end of input or Ctrl-C; returns the final history."""
    input_func = input_func or input
    history = list(history)
    while True:
        try:
            entry = input_func(PROMPT)
        except EOFError:
            break
        except KeyboardInterrupt:
            output("")
            break

        command = entry.strip().lower()
        if command == 'q':
            break
        if command == 'h':
            show_history(history, output)
            continue

        try:
            _, history = process_entry(resolver, history, entry, output)
        except KeyboardInterrupt:
            output("Lookup cancelled.")

    return history


def classify_only(identifiers: Sequence[str]) -> int:
    """Print matched formats and normalized forms without any network access."""
    status = 0
    for raw in identifiers:
        formats = classify(raw.strip())
        if not formats:
            print(f"{raw}: no match", file=sys.stderr)
            status = 1
            continue
        matches = ', '.join(f"{fmt.name}={normalize(raw.strip(), fmt)}" for fmt in formats)
        print(f"{raw}: {matches}")
    return status


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resolve ISBN, ISSN, DOI, PMID, PMCID and arXiv identifiers to citations.")
    parser.add_argument("identifiers", nargs="*",
                        help="Identifiers to resolve; prompts interactively when omitted")
    parser.add_argument("--config", help="Path to config.conf")
    parser.add_argument("--email", help="Contact email for polite-pool access")
    parser.add_argument("--no-history", action="store_true",
                        help="Do not read or write the identifier history")
    parser.add_argument("--classify-only", action="store_true",
                        help="Only report which formats each identifier matches")
    parser.add_argument("--debug", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.debug)

    if args.classify_only:
        return classify_only(args.identifiers)

    config = ConfigManager(args.config)
    resolver = CitationResolver.from_config(config, email=args.email)

    try:
        if args.identifiers:
            status = 0
            for raw in args.identifiers:
                result = resolver.resolve(raw)
                if result.citation is None:
                    print(describe_failure(result), file=sys.stderr)
                    status = 1
                else:
                    print(result.citation)
            return status

        use_history = not args.no_history and config.is_enabled('HISTORY', 'enabled')
        history_path = config.get_path('HISTORY', 'history_file') if use_history else None
        history = load_history(history_path)

        history = run_interactive(resolver, history)

        if history_path is not None:
            save_history(history_path, history, config.get_int('HISTORY', 'max_entries', 100))
        return 0
    finally:
        resolver.close()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)
