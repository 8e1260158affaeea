"""Read-only string-keyed mappings of scalar values used inside config models."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import AfterValidator, PlainSerializer

Scalar = str | int | float | bool


def _freeze(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(value))


def _thaw(value: Mapping[str, Any]) -> dict[str, Any]:
    return dict(value)


# Validated as a dict, stored as a private copy behind a MappingProxyType, dumped as a dict
ScalarMapping = Annotated[dict[str, Scalar], AfterValidator(_freeze), PlainSerializer(_thaw)]
OptionalScalarMapping = Annotated[dict[str, Scalar | None], AfterValidator(_freeze), PlainSerializer(_thaw)]
