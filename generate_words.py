#!/usr/bin/env python3
"""
Generate words similar to a provided corpus.

Reads words (one per line) from a file or stdin and writes new words with
similar letter and letter-combination frequencies.
"""

import argparse
import logging
import sys
from typing import List, Optional

from markov_config import Config, load_config
from markov_words import MarkovGenerator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate words similar to a provided corpus")
    parser.add_argument("-f", "--file", help="Corpus file, one word per line (default: stdin)")
    parser.add_argument("-o", "--outfile", help="Write generated words here (default: stdout)")
    parser.add_argument("-d", "--depth", type=int, help="How many previous characters to look at (default: 2)")
    parser.add_argument("-w", "--wordcount", type=int, help="Number of words to generate")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible output")
    parser.add_argument("--progress", action="store_true", default=None, help="Show a training progress bar")
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    return parser


def train_generator(config: Config) -> MarkovGenerator:
    if config.corpus_file:
        return MarkovGenerator.from_file(
            config.corpus_file, config.depth,
            show_progress=config.show_progress, seed=config.seed,
        )
    generator = MarkovGenerator.from_lines(
        sys.stdin, config.depth,
        show_progress=config.show_progress, seed=config.seed,
    )
    logging.info("Trained on %s words from stdin", generator.words_trained)
    return generator


def write_words(words: List[str], outfile: Optional[str]) -> None:
    if outfile:
        with open(outfile, "w", encoding="utf-8") as f:
            for word in words:
                f.write(word + "\n")
        logging.info("Wrote %s words to %s", len(words), outfile)
    else:
        for word in words:
            print(word)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(
            args.config,
            depth=args.depth,
            word_count=args.wordcount,
            seed=args.seed,
            corpus_file=args.file,
            output_file=args.outfile,
            show_progress=args.progress,
            log_level="DEBUG" if args.verbose else None,
        )
    except (OSError, ValueError) as e:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logging.error("Configuration error: %s", e)
        return 1

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        generator = train_generator(config)
        if generator.words_trained == 0:
            logging.error("Corpus contains no words")
            return 1
        words = generator.generate_words(config.word_count)
        write_words(words, config.output_file)
    except (OSError, UnicodeDecodeError) as e:
        logging.error("I/O error: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
