import pytest
from pydantic import BaseModel, ValidationError
from sample_functions import Contact, Increment, Search, Weather

from pydantic_functions import InvalidArgumentsError, parse_arguments, render_validation_error
from pydantic_functions.logging_utils import set_logger


def test_parse_valid_arguments():
    parameters = parse_arguments(
        "get_current_weather", '{"location": "Boulder", "format": "celsius"}', Weather
    )

    assert parameters == Weather(location="Boulder", format="celsius")


def test_parse_applies_defaults():
    parameters = parse_arguments("search", '{"query": "shoes"}', Search)

    assert parameters.query == "shoes"
    assert parameters.limit == 10


def test_parse_returns_canonical_value_by_alias():
    parameters = parse_arguments("increment", '{"incrementBy": 5}', Increment)

    assert isinstance(parameters.increment_by, float)
    assert parameters.increment_by == 5.0


def test_parse_invalid_enum_value():
    with pytest.raises(InvalidArgumentsError) as exc_info:
        parse_arguments(
            "get_current_weather", '{"location": "Boulder", "format": "kelvin"}', Weather
        )

    err = exc_info.value
    assert err.name == "get_current_weather"
    assert err.arguments == '{"location": "Boulder", "format": "kelvin"}'
    assert "format" in err.detail
    assert err.message.startswith("Invalid get_current_weather function args: Validation error:")
    assert err.status == 500
    assert err.source == "OpenAI"
    assert err.model_sourced is True


def test_parse_aggregates_every_violation():
    with pytest.raises(InvalidArgumentsError) as exc_info:
        parse_arguments("get_current_weather", '{"location": 42}', Weather)

    detail = exc_info.value.detail
    assert "location: " in detail
    assert "format: Field required" in detail
    assert detail.count(";") == 1


def test_parse_reports_nested_paths():
    with pytest.raises(InvalidArgumentsError) as exc_info:
        parse_arguments("save_contact", '{"name": "Ann", "address": {"city": "Boulder"}}', Contact)

    assert "address.zip_code: Field required" in exc_info.value.detail


def test_parse_rejects_unknown_fields_when_schema_forbids_them():
    with pytest.raises(InvalidArgumentsError) as exc_info:
        parse_arguments("search", '{"query": "shoes", "sort": "price"}', Search)

    assert "sort: Extra inputs are not permitted" in exc_info.value.detail


@pytest.mark.parametrize("arguments", ['{"location": "Boulder"', "", "not json"])
def test_parse_malformed_json(arguments):
    with pytest.raises(InvalidArgumentsError) as exc_info:
        parse_arguments("get_current_weather", arguments, Weather)

    assert "Invalid JSON" in exc_info.value.detail
    assert exc_info.value.model_sourced is True


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_parse_rejects_non_json_number_literals(constant):
    with pytest.raises(InvalidArgumentsError) as exc_info:
        parse_arguments("increment", f'{{"incrementBy": {constant}}}', Increment)

    assert exc_info.value.detail == f"Invalid JSON: {constant} is not valid JSON"


@pytest.mark.parametrize("arguments", ["[]", '"Boulder"', "null", "3"])
def test_parse_non_object_json(arguments):
    with pytest.raises(InvalidArgumentsError) as exc_info:
        parse_arguments("get_current_weather", arguments, Weather)

    assert "(root): " in exc_info.value.detail


def test_parse_logs_raw_arguments_on_failure(recorder):
    arguments = '{"location": "Boulder", "format": "kelvin"}'
    with pytest.raises(InvalidArgumentsError):
        parse_arguments("get_current_weather", arguments, Weather, logger=recorder)

    [event] = recorder.named("invalid_arguments")
    assert event["function_name"] == "get_current_weather"
    assert event["arguments"] == arguments
    assert "format" in event["message"]
    assert recorder.events[0][0] == "error"


def test_parse_uses_process_wide_logger(recorder):
    set_logger(recorder)
    with pytest.raises(InvalidArgumentsError):
        parse_arguments("get_current_weather", "{", Weather)

    assert len(recorder.named("invalid_arguments")) == 1


def test_parse_success_logs_nothing(recorder):
    parse_arguments("search", '{"query": "shoes"}', Search, logger=recorder)

    assert recorder.events == []


def test_render_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        Weather.model_validate({"format": "kelvin"})

    rendered = render_validation_error(exc_info.value)
    assert rendered.startswith("Validation error: ")
    assert "location: Field required" in rendered
    assert "format: Input should be 'celsius' or 'fahrenheit'" in rendered


class Toggle(BaseModel):
    enabled: bool


@pytest.mark.parametrize(
    "name, arguments, schema, field",
    [
        ("increment", '{"incrementBy": "5"}', Increment, "incrementBy"),
        ("search", '{"query": "x", "limit": "7"}', Search, "limit"),
        ("search", '{"query": 3}', Search, "query"),
        ("toggle", '{"enabled": "true"}', Toggle, "enabled"),
        ("toggle", '{"enabled": 1}', Toggle, "enabled"),
    ],
)
def test_parse_does_not_coerce_mistyped_values(name, arguments, schema, field):
    with pytest.raises(InvalidArgumentsError) as exc_info:
        parse_arguments(name, arguments, schema)

    assert exc_info.value.detail.startswith(f"Validation error: {field}: ")


def test_parse_accepts_int_for_float_field():
    assert parse_arguments("increment", '{"incrementBy": 5}', Increment).increment_by == 5.0
