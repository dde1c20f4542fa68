"""
spaCy integration for greek-betacode.

Provides a pipeline component that transliterates Betacode documents.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("xx")
    >>> nlp.add_pipe("betacode_transliterator")
    >>> doc = nlp("mh=nin a)ei/de")
    >>> doc._.greek
    'μῆνιν ἀείδε'
"""

import io

from spacy.language import Language
from spacy.tokens import Doc

from greek_betacode.writer._stream import Writer, WriterConfig

__all__ = [
    "BetacodeTransliteratorComponent",
    "create_betacode_transliterator",
]


@Language.factory(
    "betacode_transliterator",
    default_config={"combining": False, "standard": True},
    assigns=["doc._.greek"],
)
def create_betacode_transliterator(
    nlp: Language,
    name: str,
    combining: bool = False,
    standard: bool = True,
) -> "BetacodeTransliteratorComponent":
    """Create a Betacode transliterator pipeline component."""
    return BetacodeTransliteratorComponent(
        nlp, name, combining=combining, standard=standard
    )


class BetacodeTransliteratorComponent:
    """
    spaCy pipeline component for Betacode to Greek transliteration.

    The whole document text is transliterated in one pass, so symbols
    split across tokens by the tokenizer (e.g. ``a)/``) stay intact.
    Invalid Betacode raises WriteError.

    Extensions:
        - Doc._.greek: Greek transliteration of the document text.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        combining: bool = False,
        standard: bool = True,
    ) -> None:
        self.name = name
        self.config = WriterConfig(combining=combining, standard_asterisk=standard)

        if not Doc.has_extension("greek"):
            Doc.set_extension("greek", default=None)

    def __call__(self, doc: Doc) -> Doc:
        out = io.StringIO()
        Writer(out, self.config).write(doc.text, end_of_word=True)
        doc._.greek = out.getvalue()
        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "BetacodeTransliteratorComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "BetacodeTransliteratorComponent":
        return self
