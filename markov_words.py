"""
A fixed-order Markov Chain word generator over characters.

"""

import logging
import random
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from tqdm import tqdm

from count_trie import CountTrie, CountTrieError
from sampling import sample_weighted

START_CHAR = "^"
END_CHAR = "$"


def strip_sentinels(word: str) -> str:
    """Remove one leading START_CHAR and one trailing END_CHAR."""
    if word.startswith(START_CHAR):
        word = word[1:]
    if word.endswith(END_CHAR):
        word = word[:-1]
    return word


class MarkovGenerator:
    """Character-level Markov model that invents words similar to its corpus."""

    def __init__(self, depth: int = 2, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """Initialize with specified depth (number of previous characters used)."""
        if depth < 0:
            raise ValueError("Depth must be non-negative")

        self.depth = depth
        self.trie = CountTrie(START_CHAR)
        self.words_trained = 0
        self.rng = rng if rng is not None else random.Random(seed)

    @classmethod
    def from_lines(cls, lines: Iterable[str], depth: int = 2, show_progress: bool = False, **kwargs) -> "MarkovGenerator":
        """Build a generator trained on every non-blank line."""
        generator = cls(depth, **kwargs)
        words = [line.strip() for line in lines]
        generator.train_all([w for w in words if w], show_progress=show_progress)
        return generator

    @classmethod
    def from_file(cls, path: Union[str, Path], depth: int = 2, show_progress: bool = False, **kwargs) -> "MarkovGenerator":
        """Build a generator from a UTF-8 corpus file, one word per line."""
        with open(path, "r", encoding="utf-8") as f:
            generator = cls.from_lines(f, depth, show_progress=show_progress, **kwargs)
        logging.info("Trained on %s words from %s", generator.words_trained, path)
        return generator

    def train(self, word: str) -> None:
        """Add one word to the model."""
        word_full = word + END_CHAR

        # Short words can't fill a window, keep them whole
        if len(word) < self.depth:
            self.trie.insert(word_full)

        window = self.depth + 1
        for i in range(len(word_full) - window + 1):
            self.trie.insert(word_full[i:i + window])

        self.words_trained += 1

    def train_all(self, words: Iterable[str], show_progress: bool = False) -> None:
        """Train the model on a sequence of words."""
        for word in tqdm(words, desc="Training", unit="word", disable=not show_progress):
            self.train(word)
        logging.info("Model holds %s nodes after %s words", len(self.trie), self.words_trained)

    def next_character_counts(self, context: str) -> Dict[str, int]:
        """Next-character distribution after `context` (sentinel excluded)."""
        return self.trie.next_character_counts(context)

    def generate(self) -> str:
        """Generate one word wrapped in START_CHAR and END_CHAR."""
        if self.trie.count == 0:
            raise ValueError("Generator has not been trained")

        result = [START_CHAR]

        while result[-1] != END_CHAR:
            generated = len(result) - 1
            # Sliding window over the last `depth` characters
            if generated <= self.depth:
                context = "".join(result[1:])
            else:
                context = "".join(result[len(result) - self.depth:])

            try:
                next_chars = self.trie.next_character_counts(context)
            except CountTrieError as e:
                # Context never seen in training, end the word here
                logging.debug("No continuation for %r (%s), ending word", context, e)
                result.append(END_CHAR)
                continue

            result.append(sample_weighted(next_chars, self.rng))

        return "".join(result)

    def generate_words(self, count: int) -> List[str]:
        """Generate `count` words with the sentinels stripped."""
        if count < 0:
            raise ValueError("count must be non-negative")
        return [strip_sentinels(self.generate()) for _ in range(count)]

    def get_stats(self) -> Dict:
        """Return basic statistics about the trained model."""
        return {
            "depth": self.depth,
            "words_trained": self.words_trained,
            "total_inserts": self.trie.count,
            "nodes": len(self.trie),
            "trie_height": self.trie.depth(),
            "root_children": len(self.trie.children),
        }


def main():
    """Example usage of the Markov word generator."""
    generator = MarkovGenerator(depth=2, seed=42)

    sample_words = [
        "apple", "apricot", "banana", "blueberry", "cherry",
        "grape", "lemon", "mango", "melon", "orange",
        "papaya", "peach", "pear", "plum", "raspberry",
    ]

    generator.train_all(sample_words)

    print("Model Statistics:")
    for key, value in generator.get_stats().items():
        print(f"  {key}: {value}")

    print("\nGenerated Words:")
    for i, word in enumerate(generator.generate_words(5)):
        print(f"  {i+1}: {word}")


if __name__ == "__main__":
    main()
