from __future__ import annotations

import logging
from typing import AbstractSet, Dict, List, Sequence, Tuple

from .config import ReadabilityConfig
from .consensus import describe, evaluate_consensus, is_hard_to_read
from .diagnostics import Diagnostic, DiagnosticsFile
from .lexical import SentenceStatistics, collect_statistics, to_formula_counts
from .models import SENTENCE, WORD, Document, Node
from .scoring import FORMULAS, ReadabilityFormula, ScoreVector, score_counts
from .tokenization import parse_english
from .treeutils import Selector, select_all, to_string
from .vocabulary import (
    SyllableCounter,
    count_syllables,
    dale_chall_easy_words,
    spache_familiar_words,
)

LOGGER = logging.getLogger(__name__)

RULE_ID = "readability"
SOURCE = "retext-readability"
URL = "https://github.com/retextjs/retext-readability#readme"


class ReadabilityAnalyzer:
    """
    Warn about sentences that several readability formulas find too hard.

    Every sentence with at least ``config.min_words`` words is scored by each
    formula, the scores are converted to reader ages, and the sentence is
    reported once when the share of formulas above ``config.age`` reaches
    ``config.threshold``.

    The collaborators (tree walking, syllable counting, the two word lists
    and the formula table) default to the bundled English ones and can be
    swapped for testing or other data sources. An instance keeps no state
    between calls.
    """

    def __init__(
        self,
        config: ReadabilityConfig | None = None,
        *,
        select: Selector = select_all,
        syllable_counter: SyllableCounter = count_syllables,
        familiar_words: AbstractSet[str] | None = None,
        easy_words: AbstractSet[str] | None = None,
        readability_formulas: Sequence[ReadabilityFormula] = FORMULAS,
    ) -> None:
        self.config = config or ReadabilityConfig()
        self._select = select
        self._count_syllables = syllable_counter
        self._familiar = (
            spache_familiar_words() if familiar_words is None else familiar_words
        )
        self._easy = dale_chall_easy_words() if easy_words is None else easy_words
        self._formulas = tuple(readability_formulas)

    def __call__(self, tree: Node, file: DiagnosticsFile) -> None:
        for sentence, ancestors in self._select(tree, SENTENCE):
            self.check_sentence(sentence, ancestors, file)

    def sentence_statistics(self, sentence: Node) -> SentenceStatistics:
        """Gather lexical statistics over the words of one sentence."""
        words = (to_string(word) for word, _ in self._select(sentence, WORD))
        return collect_statistics(
            words,
            count_syllables=self._count_syllables,
            familiar=self._familiar,
            easy=self._easy,
        )

    def score_sentence(self, sentence: Node) -> ScoreVector | None:
        """Reader ages for one sentence, or None when it is too short to score."""
        stats = self.sentence_statistics(sentence)
        if stats.words < self.config.min_words:
            return None
        return score_counts(to_formula_counts(stats), self._formulas)

    def check_sentence(
        self,
        sentence: Node,
        ancestors: Tuple[Node, ...],
        file: DiagnosticsFile,
    ) -> Diagnostic | None:
        """Score one sentence and register a warning on ``file`` if it is too hard."""
        scores = self.score_sentence(sentence)
        if scores is None:
            return None

        consensus = evaluate_consensus(scores, self.config.age)
        LOGGER.debug(
            "Sentence at %s: %s formulas above age %s (%s).",
            sentence.position,
            consensus.label,
            self.config.age,
            ", ".join(consensus.failing) or "none",
        )
        if not is_hard_to_read(consensus, self.config.threshold):
            return None

        message = file.message(
            describe(consensus),
            place=sentence.position,
            ancestors=ancestors[-1:] + (sentence,),
            rule_id=RULE_ID,
            source=SOURCE,
        )
        message.actual = to_string(sentence)
        message.expected = []
        message.confidence = consensus.confidence
        message.confidence_label = consensus.label
        message.url = URL
        return message


def process_document(
    doc: Document,
    config: ReadabilityConfig,
    analyzer: ReadabilityAnalyzer | None = None,
) -> DiagnosticsFile:
    """Parse a document and check every sentence in it."""
    analyzer = analyzer or ReadabilityAnalyzer(config)
    file = DiagnosticsFile(value=doc.text, path=doc.doc_id)
    analyzer(parse_english(doc.text), file)
    LOGGER.info(
        "Checked %s: %d hard to read sentence(s).", doc.doc_id, len(file.messages)
    )
    return file


def process_corpus(
    documents: List[Document], config: ReadabilityConfig
) -> Dict[str, DiagnosticsFile]:
    """Check all documents with one shared analyzer and return the per-document files."""
    analyzer = ReadabilityAnalyzer(config)
    results: Dict[str, DiagnosticsFile] = {}
    for document in documents:
        results[document.doc_id] = process_document(document, config, analyzer)
    return results


def check_text(text: str, config: ReadabilityConfig | None = None) -> List[Diagnostic]:
    """Convenience wrapper: check a string and return its warnings."""
    doc = Document(doc_id="<text>", text=text)
    return process_document(doc, config or ReadabilityConfig()).messages
