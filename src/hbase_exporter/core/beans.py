"""Bean selection and fixed-schema decoding of JMX payloads.

The JMX servlet answers every query with an envelope of the form
``{"beans": [{attribute: value, ...}, ...]}``. Each supported query matches a
single bean, so only the first element is consulted.
"""

import dataclasses
import json
from typing import Any, TypeVar

from hbase_exporter.core.errors import ParseError, ParseFailure

T = TypeVar("T")

# Metadata key holding the JMX attribute name of a record field
JMX_ATTRIBUTE = "jmx"

_ZERO_VALUES: dict[type, Any] = {int: 0, float: 0.0, str: ""}


def jmx_field(attribute: str) -> Any:
    """Declare a record field read from the given JMX attribute."""
    return dataclasses.field(metadata={JMX_ATTRIBUTE: attribute})


def select_bean(payload: bytes | str) -> dict[str, Any]:
    """Extract the first bean of a JMX envelope.

    Args:
        payload: Raw response body.

    Returns:
        The attribute mapping of element 0 of the ``beans`` array.

    Raises:
        ParseError: MALFORMED if the payload is not valid JSON or not a bean
            envelope, EMPTY_BEAN_ARRAY if the ``beans`` array is empty.
    """
    try:
        document = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(ParseFailure.MALFORMED, str(exc)) from exc

    if not isinstance(document, dict):
        raise ParseError(ParseFailure.MALFORMED, "envelope is not an object")
    beans = document.get("beans")
    if not isinstance(beans, list):
        raise ParseError(ParseFailure.MALFORMED, "missing 'beans' array")
    if not beans:
        raise ParseError(ParseFailure.EMPTY_BEAN_ARRAY)
    bean = beans[0]
    if not isinstance(bean, dict):
        raise ParseError(ParseFailure.MALFORMED, "bean is not an object")
    return bean


def _coerce(attribute: str, value: Any, target: type) -> Any:
    if target is str:
        if isinstance(value, str):
            return value
    # bool subclasses int but JSON true/false are not numbers
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        fractional = isinstance(value, float) and not value.is_integer()
        if not (target is int and fractional):
            try:
                return target(value)
            except (ValueError, OverflowError):
                pass
    raise ParseError(
        ParseFailure.MALFORMED,
        f"attribute {attribute!r} has unexpected value {value!r}",
    )


def decode_bean(bean: dict[str, Any], record_type: type[T]) -> T:
    """Decode a bean into a fixed-schema record dataclass.

    Missing attributes decode to the zero value of the field type. Present
    attributes of the wrong JSON type are rejected.

    Args:
        bean: Attribute mapping returned by select_bean().
        record_type: Frozen dataclass whose fields were declared with
            jmx_field().

    Returns:
        A record_type instance.

    Raises:
        ParseError: MALFORMED if an attribute has the wrong type.
    """
    values: dict[str, Any] = {}
    for record_field in dataclasses.fields(record_type):  # type: ignore[arg-type]
        attribute = record_field.metadata.get(JMX_ATTRIBUTE, record_field.name)
        target = record_field.type
        if attribute not in bean or bean[attribute] is None:
            values[record_field.name] = _ZERO_VALUES[target]  # type: ignore[index]
        else:
            values[record_field.name] = _coerce(attribute, bean[attribute], target)  # type: ignore[arg-type]
    return record_type(**values)


def decode_payload(payload: bytes | str, record_type: type[T]) -> T:
    """Select the first bean of a payload and decode it into record_type."""
    return decode_bean(select_bean(payload), record_type)
