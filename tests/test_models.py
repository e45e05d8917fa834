import pytest
from pydantic import ValidationError

from wordnik_client.errors import ParamTypeError
from wordnik_client.models import (
    ApiRequest,
    Endpoint,
    FlagValue,
    IntValue,
    PartOfSpeech,
    RelationType,
    TagValue,
    TextValue,
    to_param_value,
)


class TestParamValues:
    def test_text_passes_through(self):
        assert TextValue(value="ice cream").render() == "ice cream"

    def test_int_renders_decimal(self):
        assert IntValue(value=42).render() == "42"

    def test_flag_renders_literal(self):
        assert FlagValue(value=True).render() == "true"
        assert FlagValue(value=False).render() == "false"

    def test_tag_strips_marker(self):
        assert TagValue(name=":useSuggest").render() == "useSuggest"

    def test_tag_without_marker_unchanged(self):
        assert TagValue(name="verb").render() == "verb"

    def test_tag_strips_only_one_marker(self):
        assert TagValue(name="::odd").render() == ":odd"


class TestToParamValue:
    def test_bool_is_flag_not_int(self):
        value = to_param_value(True)
        assert isinstance(value, FlagValue)
        assert value.render() == "true"

    def test_int(self):
        assert isinstance(to_param_value(3), IntValue)

    def test_str(self):
        assert isinstance(to_param_value("run"), TextValue)

    def test_enum_becomes_tag(self):
        value = to_param_value(PartOfSpeech.VERB_TRANSITIVE)
        assert isinstance(value, TagValue)
        assert value.render() == "verb-transitive"

    def test_existing_value_returned_as_is(self):
        tag = TagValue(name=":literal")
        assert to_param_value(tag) is tag

    def test_unsupported_type_rejected(self):
        with pytest.raises(ParamTypeError):
            to_param_value(1.5)
        with pytest.raises(TypeError):
            to_param_value(["a", "b"])


class TestEndpoint:
    def test_full_path(self):
        ep = Endpoint(type="word", id="run", field="definitions")
        assert ep.path == "/api/word.json/run/definitions"

    def test_path_without_field(self):
        assert Endpoint(type="suggest", id="ru").path == "/api/suggest.json/ru"

    def test_path_without_id(self):
        assert Endpoint(type="wordoftheday").path == "/api/wordoftheday.json/"

    def test_field_without_id_rejected(self):
        with pytest.raises(ValidationError):
            Endpoint(type="word", field="definitions")

    def test_id_is_percent_encoded(self):
        ep = Endpoint(type="word", id="ice cream/cone", field="examples")
        assert ep.path == "/api/word.json/ice%20cream%2Fcone/examples"


class TestApiRequest:
    def test_default_params_empty(self):
        req = ApiRequest(endpoint=Endpoint(type="wordoftheday"))
        assert req.params == []
        assert req.rendered_params() == []

    def test_rendered_params_keep_order(self):
        req = ApiRequest(
            endpoint=Endpoint(type="word", id="run", field="related"),
            params=[
                ("type", TagValue(name=RelationType.SYNONYM.value)),
                ("count", IntValue(value=5)),
                ("useCanonical", FlagValue(value=False)),
            ],
        )
        assert req.rendered_params() == [("type", "synonym"), ("count", "5"), ("useCanonical", "false")]

    def test_params_validated_from_dicts(self):
        req = ApiRequest.model_validate({
            "endpoint": {"type": "word", "id": "run"},
            "params": [["useSuggest", {"kind": "flag", "value": True}]],
        })
        assert isinstance(req.params[0][1], FlagValue)

    def test_serialization_roundtrip(self):
        req = ApiRequest(
            endpoint=Endpoint(type="suggest", id="ru"),
            params=[("count", IntValue(value=3)), ("startAt", IntValue(value=0))],
        )
        req2 = ApiRequest(**req.model_dump())
        assert req2 == req
