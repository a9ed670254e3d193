from fitzgerald.easy_words import load_easy_words
from fitzgerald.normalization import MIN_INFLECTED_LENGTH, WordNormalizer, singularize
from tests.utils import identity


def test_short_words_skip_tense_heuristic():
    """Words under the length cutoff come back unchanged, even 'faced'."""
    normalizer = WordNormalizer({"face"}, singularizer=identity)

    assert len("faced") < MIN_INFLECTED_LENGTH
    assert normalizer.normalize("faced") == "faced"
    assert normalizer.normalize("sing") == "sing"
    assert normalizer.present_tense("jumps") == "jumps"


def test_ed_suffix_prefers_easy_silent_e_form():
    """-ed words keep the silent e only when that form is easy."""
    easy = WordNormalizer({"surface"}, singularizer=identity)
    hard = WordNormalizer(set(), singularizer=identity)

    assert easy.normalize("surfaced") == "surface"
    assert hard.normalize("surfaced") == "surfac"
    assert hard.normalize("painted") == "paint"


def test_ing_suffix_prefers_easy_e_form():
    """-ing words restore an e only when that form is easy."""
    normalizer = WordNormalizer({"jump", "force"}, singularizer=identity)

    assert normalizer.normalize("jumping") == "jump"
    assert normalizer.normalize("forcing") == "force"


def test_other_words_pass_through_lowercased():
    """Words without tense suffixes are only lowercased."""
    normalizer = WordNormalizer(set(), singularizer=identity)

    assert normalizer.normalize("Elephant") == "elephant"
    assert normalizer.normalize("DETERMINATION") == "determination"


def test_normalize_is_pure():
    """Repeated normalization gives the same answer."""
    normalizer = WordNormalizer({"force"}, singularizer=identity)

    results = {normalizer.normalize("Forcing") for _ in range(5)}
    assert results == {"force"}


def test_singularize_uses_noun_dictionary():
    """Known plural nouns, regular or not, reduce to the singular."""
    assert singularize("cats") == "cat"
    assert singularize("children") == "child"
    assert singularize("qwzxv") == "qwzxv"


def test_normalize_singularizes_before_tense():
    """Singularization runs on the lowercased token before the tense step."""
    calls = []

    def recording_singularizer(word: str) -> str:
        calls.append(word)
        return word[:-1] if word.endswith("s") else word

    normalizer = WordNormalizer({"surface"}, singularizer=recording_singularizer)

    assert normalizer.normalize("Surfaces") == "surface"
    assert calls == ["surfaces"]


def test_singularize_reduces_third_person_verbs():
    """Third-person -s forms of known verbs reduce to the base verb."""
    assert singularize("remembers") == "remember"
    assert singularize("discovers") == "discover"
    assert singularize("always") == "always"


def test_singularize_strips_unknown_regular_plurals():
    """Words missing from the dictionary lose a plural -s by rule."""
    assert singularize("blorps") == "blorp"
    assert singularize("qwzxv") == "qwzxv"


def test_verb_forms_reach_the_bundled_easy_list():
    """'remembers' normalizes onto 'remember' from the bundled word list."""
    normalizer = WordNormalizer(load_easy_words())

    assert normalizer.normalize("Remembers") == "remember"
    assert normalizer.normalize("discovers") in load_easy_words()
