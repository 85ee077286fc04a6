"""Reference rewriting and resolution tests."""

from __future__ import annotations

import copy

import pytest
from swagger_typegen.codegen.core.generator import (
    MissingDefinitionsError,
    UnresolvedReferenceError,
)
from swagger_typegen.codegen.core.references import (
    ReferenceResolver,
    canonical_path,
    rewrite_reference_paths,
)


def _document() -> dict:
    return {
        "swagger": "2.0",
        "definitions": {
            "User": {
                "type": "object",
                "properties": {
                    "team": {"$ref": "#/definitions/Team"},
                    "teams": {"type": "array", "items": {"$ref": "#/definitions/Team"}},
                },
            },
            "Team": {"type": "object", "properties": {"id": {"type": "string"}}},
        },
    }


def test_canonical_path_strips_definitions_prefix() -> None:
    assert canonical_path("#/definitions/User") == "User"
    assert canonical_path("#/definitions/User%201") == "User 1"
    assert canonical_path("#/definitions/a~1b~0c") == "a/b~c"


@pytest.mark.parametrize(
    "ref", ["#/parameters/limit", "other.json#/definitions/User", "#/definitions/"]
)
def test_canonical_path_rejects_non_local_references(ref: str) -> None:
    with pytest.raises(UnresolvedReferenceError) as excinfo:
        canonical_path(ref)

    assert excinfo.value.reference == ref


def test_rewrite_reference_paths_produces_canonical_refs() -> None:
    definitions = rewrite_reference_paths(_document())

    assert list(definitions) == ["User", "Team"]
    user = definitions["User"]
    assert user.properties["team"].ref == "Team"
    assert user.properties["teams"].items.ref == "Team"


def test_rewrite_does_not_mutate_input() -> None:
    document = _document()
    snapshot = copy.deepcopy(document)

    rewrite_reference_paths(document)

    assert document == snapshot


def test_missing_definitions_is_an_error() -> None:
    with pytest.raises(MissingDefinitionsError, match="no definitions in schema"):
        rewrite_reference_paths({"swagger": "2.0"})


def test_null_definitions_is_an_error() -> None:
    with pytest.raises(MissingDefinitionsError):
        rewrite_reference_paths({"swagger": "2.0", "definitions": None})


def test_empty_definitions_are_valid() -> None:
    assert rewrite_reference_paths({"definitions": {}}) == {}


def test_unknown_reference_target_is_an_error() -> None:
    document = {
        "definitions": {
            "User": {"properties": {"team": {"$ref": "#/definitions/Missing"}}},
        }
    }

    with pytest.raises(UnresolvedReferenceError) as excinfo:
        rewrite_reference_paths(document)

    assert excinfo.value.reference == "#/definitions/Missing"


def test_resolver_lookup() -> None:
    resolver = ReferenceResolver.from_document(_document())

    assert len(resolver) == 2
    assert "Team" in resolver
    assert "Missing" not in resolver
    assert list(resolver.paths()) == ["User", "Team"]
    assert resolver.resolve("Team").properties["id"].type == "string"


def test_resolver_unknown_path() -> None:
    resolver = ReferenceResolver.from_document(_document())

    with pytest.raises(UnresolvedReferenceError):
        resolver.resolve("Missing")
