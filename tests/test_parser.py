"""
Тесты построения эндпоинтов и группировки по тегам
"""

import json

import pytest

from openapi_ts_client.internal.parser.loader import SpecLoadError, load_spec
from openapi_ts_client.internal.parser.openapi import OpenApiParser, build_endpoint
from openapi_ts_client.internal.types.endpoint import Parameter


class TestBuildEndpoint:
    """Тесты Endpoint Builder"""

    def test_defaults_without_operation_id_and_summary(self):
        endpoint = build_endpoint("/clubs/{clubId}", "get", {}, [])

        assert endpoint.id == "get_clubs_clubId"
        assert endpoint.operation_id == "get_clubs_clubId"
        assert endpoint.name == "get_clubs_clubId"
        assert endpoint.method == "GET"
        assert endpoint.path == "/clubs/{clubId}"
        assert endpoint.deprecated is False
        assert endpoint.security == []
        assert endpoint.request_body is None
        assert endpoint.responses == []

    def test_operation_id_and_summary(self):
        endpoint = build_endpoint(
            "/posts",
            "post",
            {
                "operationId": "createPost",
                "summary": "Create post",
                "description": "Creates a post",
                "deprecated": True,
                "security": [{"bearer": []}],
            },
            [],
        )

        assert endpoint.id == "createPost"
        assert endpoint.name == "Create post"
        assert endpoint.description == "Creates a post"
        assert endpoint.deprecated is True
        assert endpoint.security == [{"bearer": []}]

    def test_empty_summary_is_a_value(self):
        endpoint = build_endpoint("/x", "get", {"summary": "", "operationId": "x"}, [])
        assert endpoint.name == ""

    def test_path_is_not_rewritten(self):
        path = "/clubs/{clubId}/posts/{postId}"
        assert build_endpoint(path, "delete", {}, []).path == path


class TestOpenApiParser:
    """Тесты Collection Builder"""

    def test_minimal_spec_is_untagged(self):
        spec = {
            "info": {"title": "Ping API"},
            "paths": {"/ping": {"get": {"summary": "Ping"}}},
        }

        parser = OpenApiParser(spec)
        groups = parser.parse()

        assert list(groups) == ["Untagged"]
        (endpoint,) = groups["Untagged"]
        assert endpoint.name == "Ping"
        assert endpoint.id == "get_ping"
        assert parser.title == "Ping API"

    def test_default_title(self):
        assert OpenApiParser({"paths": {}}).title == "API"
        assert OpenApiParser({"info": "broken"}).title == "API"

    def test_multiple_tags_share_one_endpoint(self):
        spec = {
            "paths": {
                "/clubs/{clubId}/posts": {
                    "get": {"summary": "List posts", "tags": ["Posts", "Clubs"]}
                },
                "/clubs": {"get": {"summary": "List clubs", "tags": ["Clubs"]}},
            }
        }

        groups = OpenApiParser(spec).parse()

        assert set(groups) == {"Posts", "Clubs"}
        assert len(groups["Posts"]) == 1
        assert len(groups["Clubs"]) == 2
        shared = groups["Posts"][0]
        assert any(endpoint is shared for endpoint in groups["Clubs"])

    def test_empty_tags_fall_back_to_untagged(self):
        spec = {"paths": {"/a": {"get": {"tags": []}}}}
        assert list(OpenApiParser(spec).parse()) == ["Untagged"]

    def test_sorted_by_name(self):
        spec = {
            "paths": {
                "/zebra": {"get": {"summary": "Zebra export", "tags": ["Data"]}},
                "/alpha": {"post": {"summary": "Alpha import", "tags": ["Data"]}},
                "/middle": {"put": {"summary": "middle sync", "tags": ["Data"]}},
            }
        }

        groups = OpenApiParser(spec).parse()

        assert [e.name for e in groups["Data"]] == [
            "Alpha import",
            "middle sync",
            "Zebra export",
        ]

    def test_sorted_by_locale_collation(self):
        spec = {
            "paths": {
                "/fig": {"get": {"summary": "Fig list", "tags": ["Data"]}},
                "/eclair": {"get": {"summary": "Éclair list", "tags": ["Data"]}},
                "/yolka": {"get": {"summary": "Ёлка", "tags": ["Data"]}},
                "/zhuk": {"get": {"summary": "Жук", "tags": ["Data"]}},
            }
        }

        groups = OpenApiParser(spec).parse()

        # Акцентированные буквы стоят рядом с базовыми, а не после всей латиницы
        assert [e.name for e in groups["Data"]] == [
            "Éclair list",
            "Fig list",
            "Ёлка",
            "Жук",
        ]

    def test_lowercase_first_on_case_tie(self):
        spec = {
            "paths": {
                "/upper": {"get": {"summary": "Apple", "tags": ["Data"]}},
                "/lower": {"get": {"summary": "apple", "tags": ["Data"]}},
            }
        }

        groups = OpenApiParser(spec).parse()

        assert [e.name for e in groups["Data"]] == ["apple", "Apple"]

    def test_tag_insertion_order(self):
        spec = {
            "paths": {
                "/b": {"get": {"tags": ["Beta"]}},
                "/a": {"get": {"tags": ["Alpha"]}},
            }
        }

        assert list(OpenApiParser(spec).parse()) == ["Beta", "Alpha"]

    def test_shared_path_parameter(self):
        spec = {
            "paths": {
                "/items/{id}": {
                    "parameters": [{"name": "id", "in": "path", "required": True}],
                    "get": {"tags": ["Items"]},
                    "delete": {"tags": ["Items"]},
                }
            }
        }

        groups = OpenApiParser(spec).parse()

        assert len(groups["Items"]) == 2
        for endpoint in groups["Items"]:
            assert len(endpoint.parameters) == 1
            param = endpoint.parameters[0]
            assert isinstance(param, Parameter)
            assert param.name == "id"
            assert param.required is True

    def test_unsupported_methods_and_garbage_skipped(self):
        spec = {
            "paths": {
                "/broken": "not an object",
                "/none": None,
                "/items": {
                    "trace": {"summary": "Trace"},
                    "GET": {"summary": "Upper case key"},
                    "post": None,
                    "summary": "path summary",
                    "parameters": [],
                    "get": {"summary": "List items"},
                },
            }
        }

        groups = OpenApiParser(spec).parse()

        assert [e.name for e in groups["Untagged"]] == ["List items"]

    def test_all_supported_methods(self):
        methods = ["get", "post", "put", "delete", "patch", "head", "options"]
        spec = {"paths": {"/r": {m: {"operationId": m} for m in methods}}}

        groups = OpenApiParser(spec).parse()

        assert sorted(e.method for e in groups["Untagged"]) == sorted(m.upper() for m in methods)

    def test_paths_not_a_mapping(self):
        assert OpenApiParser({"paths": []}).parse() == {}
        assert OpenApiParser({}).parse() == {}


class TestLoadSpec:
    """Тесты загрузки спецификации"""

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "swagger.json"
        path.write_text(json.dumps({"paths": {}}), encoding="utf-8")

        assert load_spec(str(path)) == {"paths": {}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(SpecLoadError):
            load_spec(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "swagger.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SpecLoadError):
            load_spec(str(path))

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "swagger.json"
        path.write_bytes(b'{"info": {"title": "\xff\xfe"}}')

        with pytest.raises(SpecLoadError):
            load_spec(str(path))

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "swagger.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(SpecLoadError):
            load_spec(str(path))

    def test_refs_preserved_by_default(self, tmp_path):
        spec = {
            "paths": {
                "/posts": {
                    "post": {
                        "requestBody": {
                            "content": {
                                "application/json": {
                                    "schema": {"$ref": "#/components/schemas/Post"}
                                }
                            }
                        }
                    }
                }
            },
            "components": {"schemas": {"Post": {"type": "object"}}},
        }
        path = tmp_path / "swagger.json"
        path.write_text(json.dumps(spec), encoding="utf-8")

        groups = OpenApiParser(load_spec(str(path))).parse()
        content = groups["Untagged"][0].request_body.content[0]

        assert content.schema_summary == {"ref": "#/components/schemas/Post"}

    def test_refs_resolved_on_request(self, tmp_path):
        spec = {
            "paths": {
                "/posts": {
                    "post": {
                        "requestBody": {
                            "content": {
                                "application/json": {
                                    "schema": {"$ref": "#/components/schemas/Post"}
                                }
                            }
                        }
                    }
                }
            },
            "components": {
                "schemas": {
                    "Post": {
                        "type": "object",
                        "properties": {"title": {"type": "string"}},
                    }
                }
            },
        }
        path = tmp_path / "swagger.json"
        path.write_text(json.dumps(spec), encoding="utf-8")

        groups = OpenApiParser(load_spec(str(path), resolve_refs=True)).parse()
        content = groups["Untagged"][0].request_body.content[0]

        assert content.schema_summary == {
            "type": "object",
            "properties": {"title": {"type": "string"}},
        }
