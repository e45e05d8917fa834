"""Request builders, one per Wordnik endpoint.

Each function only shapes an ApiRequest; nothing here touches the network.
Optional arguments that are not given never reach the query string.
"""

from .models import ApiRequest, Endpoint, IntValue, TextValue, to_param_value


def _request(type_: str, id_: str | None = None, field: str | None = None, *pairs) -> ApiRequest:
    params = [(name, to_param_value(value)) for name, value in pairs if value is not None]
    return ApiRequest(endpoint=Endpoint(type=type_, id=id_, field=field), params=params)


def _int(value) -> IntValue | None:
    """Strict integer for count-like options; non-integers fail validation."""
    if value is None:
        return None
    return IntValue(value=value)


def _joined(values) -> TextValue | None:
    """Join a filter list with commas, in call order; None when empty."""
    if not values:
        return None
    return TextValue(value=",".join(to_param_value(v).render() for v in values))


def spelling_suggestions(word: str) -> ApiRequest:
    return _request("word", word, None, ("useSuggest", True))


def fix_spelling(word: str) -> ApiRequest:
    return _request("word", word, None, ("useSuggest", True), ("literal", False))


def bigram_phrases(word: str) -> ApiRequest:
    return _request("word", word, "phrases")


def definitions(word: str, count: int | None = None, *parts_of_speech) -> ApiRequest:
    """Definitions of a word, optionally limited in number and by part of speech."""
    return _request(
        "word", word, "definitions",
        ("count", _int(count)),
        ("partOfSpeech", _joined(parts_of_speech)),
    )


def examples(word: str) -> ApiRequest:
    return _request("word", word, "examples")


def related_words(word: str, count: int | None = None, *relation_types) -> ApiRequest:
    return _request(
        "word", word, "related",
        ("count", _int(count)),
        ("type", _joined(relation_types)),
    )


def frequency(word: str) -> ApiRequest:
    return _request("word", word, "frequency")


def punctuation_factor(word: str) -> ApiRequest:
    return _request("word", word, "punctuationFactor")


def autocompletions(fragment: str, count: int | None = None, start_at: int | None = None) -> ApiRequest:
    return _request("suggest", fragment, None, ("count", _int(count)), ("startAt", _int(start_at)))


def word_of_the_day() -> ApiRequest:
    return _request("wordoftheday")


def random_word(has_dictionary_ref: bool | None = None) -> ApiRequest:
    return _request("words", "randomWord", None, ("hasDictionaryRef", has_dictionary_ref))


def pronunciations(word: str) -> ApiRequest:
    return _request("words", word, "pronunciations")
