"""Wordnik API client.

WordnikClient is the single place that talks to the network: every facade
method builds an ApiRequest and passes it to send(), which issues one
blocking GET and decodes the JSON body.
"""

import logging
from typing import Any

import requests

from . import facades
from .config import ClientConfig, load_config
from .decode import decode_body
from .errors import DecodeError, RemoteError, TransportError
from .models import ApiRequest
from .query import build_url, redact

logger = logging.getLogger(__name__)


class WordnikClient:
    """Synchronous client for the Wordnik REST API."""

    def __init__(
        self,
        api_key: str | None = None,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
    ):
        if config is None:
            config = load_config(api_key=api_key)
        elif api_key is not None:
            config = config.model_copy(update={"api_key": api_key})
        self.config = config
        self.session = session or requests.Session()
        self.last_response: requests.Response | None = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        self.session.close()

    def url_for(self, request: ApiRequest) -> str:
        return build_url(self.config.base_url, self.config.api_key, request)

    def send(self, request: ApiRequest, retain: bool | None = None) -> Any:
        """Issue the request and return the decoded JSON payload.

        The response is closed once decoded. With retain (or the config's
        retain_responses default) it is kept open on last_response instead.
        """
        url = self.url_for(request)
        safe_url = redact(url, self.config.api_key)
        logger.debug("GET %s", safe_url)

        try:
            response = self.session.get(url, timeout=self.config.timeout, stream=True)
        except requests.RequestException as e:
            raise TransportError(f"GET {safe_url} failed: {e}", url=safe_url) from e

        if retain is None:
            retain = self.config.retain_responses
        try:
            return self._read(response, safe_url)
        finally:
            if retain:
                if self.last_response is not None and self.last_response is not response:
                    self.last_response.close()
                self.last_response = response
            else:
                response.close()

    def _read(self, response: requests.Response, safe_url: str) -> Any:
        try:
            raw = response.content
        except requests.RequestException as e:
            raise TransportError(f"Reading response from {safe_url} failed: {e}", url=safe_url) from e

        logger.debug("%s %s (%d bytes)", response.status_code, safe_url, len(raw))
        if not 200 <= response.status_code < 300:
            body = raw.decode("utf-8", errors="replace")
            raise RemoteError(response.status_code, response.reason or "", body, url=safe_url)

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Response from {safe_url} is not UTF-8: {e}") from e
        return decode_body(text, collapse_false=self.config.collapse_false)

    # -- endpoint facades -----------------------------------------------------

    def get_spelling_suggestions(self, word: str, retain: bool | None = None) -> Any:
        return self.send(facades.spelling_suggestions(word), retain=retain)

    def fix_spelling(self, word: str, retain: bool | None = None) -> Any:
        return self.send(facades.fix_spelling(word), retain=retain)

    def get_bigram_phrases(self, word: str, retain: bool | None = None) -> Any:
        return self.send(facades.bigram_phrases(word), retain=retain)

    def get_definitions(self, word: str, count: int | None = None, *parts_of_speech, retain: bool | None = None) -> Any:
        """Definitions of word; e.g. get_definitions("run", 2, "verb", "noun")."""
        return self.send(facades.definitions(word, count, *parts_of_speech), retain=retain)

    def get_examples(self, word: str, retain: bool | None = None) -> Any:
        return self.send(facades.examples(word), retain=retain)

    def get_related_words(self, word: str, count: int | None = None, *relation_types, retain: bool | None = None) -> Any:
        return self.send(facades.related_words(word, count, *relation_types), retain=retain)

    def get_frequency(self, word: str, retain: bool | None = None) -> Any:
        return self.send(facades.frequency(word), retain=retain)

    def get_punctuation_factor(self, word: str, retain: bool | None = None) -> Any:
        return self.send(facades.punctuation_factor(word), retain=retain)

    def get_autocompletions(
        self,
        fragment: str,
        count: int | None = None,
        start_at: int | None = None,
        retain: bool | None = None,
    ) -> Any:
        return self.send(facades.autocompletions(fragment, count, start_at), retain=retain)

    def get_word_of_the_day(self, retain: bool | None = None) -> Any:
        return self.send(facades.word_of_the_day(), retain=retain)

    def get_random_word(self, has_dictionary_ref: bool | None = None, retain: bool | None = None) -> Any:
        return self.send(facades.random_word(has_dictionary_ref), retain=retain)

    def get_pronunciations(self, word: str, retain: bool | None = None) -> Any:
        return self.send(facades.pronunciations(word), retain=retain)
