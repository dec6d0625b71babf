"""Shared fixtures for deepvalid tests."""

import textwrap
import uuid

import pytest

SCHEMA_SOURCE = textwrap.dedent('''
    import re

    from deepvalid import Between, Registry, Schema, integer, sequence, string


    class People(Schema):

        @classmethod
        def define_rules(cls):
            cls.define("person", {
                "name": string(Between(1, 100)),
                "age": integer(Between(1, 100)),
                "reviews": sequence(cls.structure("review")),
            })
            cls.define("review", {
                "author": string(Between(1, 100)),
                "body": string(Between(1, 1024)),
            })


    words = Registry("words")
    words.define("word", re.compile("^[a-z]+$"))


    def build_registry():
        return words


    not_a_schema = 42
''')


@pytest.fixture
def schema_module(tmp_path, monkeypatch):
    """Write an importable schema module and return its name."""
    name = f"people_schema_{uuid.uuid4().hex}"
    (tmp_path / f"{name}.py").write_text(SCHEMA_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return name


@pytest.fixture
def valid_person():
    return {
        "name": "Bob Jones",
        "age": 22,
        "reviews": [
            {"author": "joe", "body": "a review"},
            {"author": "bill", "body": "another review"},
        ],
    }
