from json_classgen import emit_csharp, infer_schema
from json_classgen.codegen.languages.csharp import create_csharp_generator


class TestCSharpGenerator:
    """Test C# class generation"""

    def test_single_field_exact_output(self):
        code = emit_csharp(infer_schema({"name": "Ana"}, "Person"))

        assert code == (
            "using System.Collections.Generic;\n"
            "\n"
            "public class Person\n"
            "{\n"
            "    public string Name { get; set; }\n"
            "}\n"
        )

    def test_person_with_address_exact_output(self, person_schema):
        code = emit_csharp(person_schema)

        assert code == (
            "using System.Collections.Generic;\n"
            "\n"
            "public class Person\n"
            "{\n"
            "    public string Name { get; set; }\n"
            "    public double Age { get; set; }\n"
            "    public List<string> Tags { get; set; }\n"
            "    public Address Address { get; set; }\n"
            "}\n"
            "\n"
            "public class Address\n"
            "{\n"
            "    public string City { get; set; }\n"
            "}\n"
        )

    def test_unknown_and_boolean_types(self):
        code = emit_csharp(
            infer_schema({"missing": None, "items": [], "ok": False}, "Root")
        )

        assert "public object Missing { get; set; }" in code
        assert "public List<object> Items { get; set; }" in code
        assert "public bool Ok { get; set; }" in code

    def test_collection_of_records(self):
        code = emit_csharp(infer_schema({"list": [{"id": 1}]}, "Root"))

        assert "public List<List> List { get; set; }" in code
        assert "public class List\n{\n    public double Id { get; set; }\n}" in code

    def test_empty_record(self):
        code = emit_csharp(infer_schema({}, "Empty"))

        assert code.endswith("public class Empty\n{\n}\n")

    def test_factory_defaults(self):
        generator = create_csharp_generator()

        assert generator.language_name == "csharp"
        assert generator.file_extension == ".cs"
        assert generator.member_name("city") == "City"
