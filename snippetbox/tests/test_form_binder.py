from __future__ import annotations

import pytest
from pydantic import BaseModel, Field
from werkzeug.datastructures import MultiDict

from snippetbox.interfaces.http.dto import SnippetCreateForm, UserSignupForm
from snippetbox.shared.errors import FormBindingError
from snippetbox.shared.forms import decode_post_form


class TaggedForm(BaseModel):
    title: str = Field("", alias="post_title")
    tags: list[str] = Field(default_factory=list)
    owner_id: int = Field(0, exclude=True)


def test_binds_typed_values_from_multidict() -> None:
    form = decode_post_form(
        SnippetCreateForm,
        MultiDict({"title": "O snail", "content": "Climb Mount Fuji", "expires": "7"}),
    )

    assert form.title == "O snail"
    assert form.content == "Climb Mount Fuji"
    assert form.expires == 7


def test_missing_fields_keep_defaults() -> None:
    form = decode_post_form(UserSignupForm, MultiDict({"name": "Ann"}))
    assert form.name == "Ann"
    assert form.email == ""
    assert form.password == ""


def test_non_integer_is_a_binding_error() -> None:
    with pytest.raises(FormBindingError) as exc_info:
        decode_post_form(
            SnippetCreateForm,
            MultiDict({"title": "t", "content": "c", "expires": "forever"}),
        )
    assert exc_info.value.context["field"] == "expires"
    assert int(exc_info.value.status) == 400


def test_alias_lists_and_unbindable_fields() -> None:
    data = MultiDict(
        [
            ("post_title", "hello"),
            ("tags", "a"),
            ("tags", "b"),
            ("owner_id", "99"),
            ("csrf_token", "ignored"),
        ]
    )
    form = decode_post_form(TaggedForm, data)

    assert form.title == "hello"
    assert form.tags == ["a", "b"]
    assert form.owner_id == 0


def test_plain_mapping_is_accepted() -> None:
    form = decode_post_form(TaggedForm, {"post_title": "x", "tags": ["one"]})
    assert form.title == "x"
    assert form.tags == ["one"]


def test_target_must_be_a_form_model() -> None:
    with pytest.raises(FormBindingError):
        decode_post_form(dict, {"title": "x"})  # type: ignore[type-var]

    with pytest.raises(FormBindingError):
        decode_post_form(SnippetCreateForm(), {"title": "x"})  # type: ignore[arg-type]


def test_field_map_to_unknown_attribute_fails() -> None:
    with pytest.raises(FormBindingError) as exc_info:
        decode_post_form(SnippetCreateForm, {"heading": "x"}, field_map={"heading": "headline"})
    assert exc_info.value.context["field"] == "headline"


def test_field_map_rebinds_source_name() -> None:
    form = decode_post_form(
        SnippetCreateForm,
        {"heading": "mapped", "title": "ignored"},
        field_map={"heading": "title"},
    )
    assert form.title == "mapped"
