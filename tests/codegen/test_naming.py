"""Identifier and type name normalization tests."""

from __future__ import annotations

import pytest
from swagger_typegen.codegen.core.naming import (
    NameSanitizer,
    NamingCase,
    is_identifier,
    replace_whitespace,
    to_camel_case,
    to_identifier,
    to_pascal_case,
    to_type_name,
    unique_identifier,
)
from swagger_typegen.codegen.languages.typescript.naming import (
    create_typescript_sanitizer,
    quote_string,
    render_property_key,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("profile_image", "profileImage"),
        ("address_line_1", "addressLine1"),
        ("profile-image", "profileImage"),
        ("User_Team", "userTeam"),
        ("_private_field", "_privateField"),
        ("$ref_count", "$refCount"),
        ("alreadyCamel", "alreadyCamel"),
    ],
)
def test_to_camel_case(raw: str, expected: str) -> None:
    assert to_camel_case(raw) == expected


@pytest.mark.parametrize(
    "raw", ["profile_image", "address-line-1", "User_Team", "some  key", "__meta_data"]
)
def test_camel_case_is_idempotent(raw: str) -> None:
    once = to_identifier(raw, camel_case=True)
    assert to_identifier(once, camel_case=True) == once


def test_type_names_are_idempotent() -> None:
    for raw in ["User 1 Being Used", "user-team", "2fa settings", "class"]:
        for camel_case in (False, True):
            once = to_type_name(raw, camel_case)
            assert to_type_name(once, camel_case) == once


def test_to_identifier_keeps_keys_verbatim_without_camel_case() -> None:
    assert to_identifier("profile-image") == "profile-image"
    assert to_identifier("address line") == "address line"


def test_to_identifier_replaces_whitespace_in_camel_mode() -> None:
    assert to_identifier("address line one", camel_case=True) == "addressLineOne"


def test_replace_whitespace() -> None:
    assert replace_whitespace("User 1   Being\tUsed") == "User_1_Being_Used"


def test_to_pascal_case() -> None:
    assert to_pascal_case("remote_id") == "RemoteId"
    assert to_pascal_case("User 1 Being Used") == "User1BeingUsed"
    assert to_pascal_case("profile-image.url") == "ProfileImageUrl"


@pytest.mark.parametrize(
    ("raw", "camel_case", "expected"),
    [
        ("User 1", False, "User_1"),
        ("User_Team", False, "User_Team"),
        ("User_Team", True, "UserTeam"),
        ("user-team", False, "user_team"),
        ("2fa", False, "_2fa"),
        ("", False, "Type"),
        ("com.example.Pet", False, "com_example_Pet"),
        ("com.example.Pet", True, "ComExamplePet"),
    ],
)
def test_to_type_name(raw: str, camel_case: bool, expected: str) -> None:
    assert to_type_name(raw, camel_case) == expected


def test_is_identifier() -> None:
    assert is_identifier("email")
    assert is_identifier("_id")
    assert is_identifier("$ref")
    assert not is_identifier("profile-image")
    assert not is_identifier("1st")
    assert not is_identifier("first name")


def test_sanitizer_suffixes_collisions_in_claim_order() -> None:
    sanitizer = NameSanitizer()

    assert sanitizer.sanitize_name("User") == "User"
    assert sanitizer.sanitize_name("User") == "User2"
    assert sanitizer.sanitize_name("User") == "User3"
    assert sanitizer.renamed == {"User": "User3"}



def test_typescript_sanitizer_renames_reserved_words() -> None:
    sanitizer = create_typescript_sanitizer()

    assert sanitizer.sanitize_name("default") == "default_"
    assert sanitizer.sanitize_name("string") == "string_"
    assert sanitizer.sanitize_name("interface", NamingCase.PASCAL_CASE) == "Interface"


def test_unique_identifier() -> None:
    assert unique_identifier("userId", {"userId"}) == "userId2"
    assert unique_identifier("userId", {"userId", "userId2"}) == "userId3"
    assert unique_identifier("name", set()) == "name"


def test_render_property_key_quotes_invalid_identifiers() -> None:
    assert render_property_key("email") == "email"
    assert render_property_key("profile-image") == "'profile-image'"
    assert render_property_key("it's") == "'it\\'s'"


def test_quote_string_escapes_backslashes() -> None:
    assert quote_string("a\\b") == "'a\\\\b'"


@pytest.mark.parametrize(
    ("raw", "quoted"),
    [
        ("a\nb", "'a\\nb'"),
        ("a\rb", "'a\\rb'"),
        ("a\x0bb", "'a\\u000bb'"),
        ("a\x0cb", "'a\\u000cb'"),
        ("a\x1cb\x1db\x1eb", "'a\\u001cb\\u001db\\u001eb'"),
        ("a\x85b", "'a\\u0085b'"),
        ("a\u2028b\u2029c", "'a\\u2028b\\u2029c'"),
    ],
)
def test_quote_string_keeps_literals_on_one_line(raw: str, quoted: str) -> None:
    assert quote_string(raw) == quoted
    assert len(quote_string(raw).splitlines()) == 1
