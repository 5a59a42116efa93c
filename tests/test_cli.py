import io
import json

import pytest

from json_classgen.main import main


@pytest.fixture
def person_file(json_file, person_data):
    return json_file(json.dumps(person_data), name="person.json")


class TestCli:
    """Test the json-classgen command"""

    def test_prints_generated_code(self, person_file, capsys):
        exit_code = main([str(person_file), "-l", "java", "--root-name", "Person"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Person" in out
        assert "Address" in out
        assert "getName" in out

    def test_writes_output_file(self, person_file, tmp_path):
        output = tmp_path / "Person.cs"

        exit_code = main(
            [str(person_file), "-l", "c#", "--root-name", "Person", "-o", str(output)]
        )

        assert exit_code == 0
        code = output.read_text(encoding="utf-8")
        assert code.startswith("using System.Collections.Generic;\n")
        assert "public List<string> Tags { get; set; }" in code

    def test_several_languages_to_directory(self, person_file, tmp_path):
        out_dir = tmp_path / "models"

        exit_code = main(
            [
                str(person_file),
                "-l",
                "java",
                "-l",
                "py",
                "-l",
                "csharp",
                "--root-name",
                "Person",
                "-o",
                str(out_dir),
            ]
        )

        assert exit_code == 0
        assert sorted(p.name for p in out_dir.iterdir()) == [
            "Person.cs",
            "Person.java",
            "person.py",
        ]
        assert "class Person:" in (out_dir / "person.py").read_text(encoding="utf-8")

    def test_stdin_is_cleaned(self, monkeypatch, tmp_path):
        monkeypatch.setattr("sys.stdin", io.StringIO("{'id': 1, 'ok': true,}"))
        output = tmp_path / "root.py"

        exit_code = main(["--stdin", "-l", "python", "-o", str(output)])

        assert exit_code == 0
        code = output.read_text(encoding="utf-8")
        assert "    id: float\n" in code
        assert "    ok: bool\n" in code

    def test_no_clean_rejects_single_quotes(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("{'id': 1}"))

        exit_code = main(["--stdin", "-l", "python", "--no-clean"])

        assert exit_code == 1
        assert "Invalid JSON" in capsys.readouterr().out

    def test_invalid_json_file(self, json_file):
        assert main([str(json_file("{broken")), "-l", "java"]) == 1

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "absent.json"), "-l", "java"]) == 1

    def test_unsupported_language(self, person_file, capsys):
        exit_code = main([str(person_file), "-l", "cobol"])

        assert exit_code == 1
        assert "Unsupported language" in capsys.readouterr().out

    def test_language_required(self, person_file):
        assert main([str(person_file)]) == 1

    def test_input_required(self):
        assert main(["-l", "java"]) == 1

    def test_primitive_root_fails(self, json_file):
        assert main([str(json_file("42")), "-l", "java"]) == 1

    def test_max_depth_option(self, json_file, capsys):
        path = json_file('{"a": {"b": {"c": 1}}}')

        assert main([str(path), "-l", "java", "--max-depth", "1"]) == 1
        assert "depth" in capsys.readouterr().out

    def test_name_collision_option(self, json_file):
        path = json_file('{"x": {"item": {}}, "y": {"item": {}}}')

        assert main([str(path), "-l", "java"]) == 0
        assert main([str(path), "-l", "java", "--name-collision", "error"]) == 1

    def test_config_file(self, json_file, tmp_path):
        config = tmp_path / "settings.json"
        config.write_text(json.dumps({"indent_size": 2}), encoding="utf-8")
        output = tmp_path / "Root.java"

        exit_code = main(
            [
                str(json_file('{"id": 1}')),
                "-l",
                "java",
                "--config",
                str(config),
                "-o",
                str(output),
            ]
        )

        assert exit_code == 0
        assert "\n  private double id;\n" in output.read_text(encoding="utf-8")

    def test_verbose_shows_warnings(self, json_file, capsys):
        exit_code = main([str(json_file('{"x": null}')), "-l", "java", "--verbose"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Warnings" in out
        assert "Root.x" in out

    def test_list_languages(self, capsys):
        assert main(["--list-languages"]) == 0

        out = capsys.readouterr().out
        for language in ["java", "python", "csharp"]:
            assert language in out

    def test_language_info(self, capsys):
        assert main(["--language-info", "cs"]) == 0
        assert ".cs" in capsys.readouterr().out

    def test_language_info_unknown(self):
        assert main(["--language-info", "cobol"]) == 1

    def test_invalid_config_value(self, json_file, tmp_path, capsys):
        config = tmp_path / "settings.json"
        config.write_text(json.dumps({"max_depth": "10"}), encoding="utf-8")

        data = json_file('{"id": 1}')

        exit_code = main([str(data), "-l", "java", "--config", str(config)])

        assert exit_code == 1
        assert "max_depth" in capsys.readouterr().out

    def test_language_sections_in_config_file(self, json_file, tmp_path):
        config = tmp_path / "settings.json"
        config.write_text(
            json.dumps({"java": {"number_type": "BigDecimal"}}), encoding="utf-8"
        )
        out_dir = tmp_path / "models"

        exit_code = main(
            [
                str(json_file('{"price": 1.5}')),
                "-l",
                "java",
                "-l",
                "python",
                "--config",
                str(config),
                "-o",
                str(out_dir),
            ]
        )

        assert exit_code == 0
        assert "private BigDecimal price;" in (out_dir / "Root.java").read_text(
            encoding="utf-8"
        )
        assert "    price: float\n" in (out_dir / "root.py").read_text(encoding="utf-8")

    def test_example_config(self, capsys):
        assert main(["--example-config"]) == 0
        assert '"number_type": "BigDecimal"' in capsys.readouterr().out

    def test_interactive_uses_command_line_settings(
        self, monkeypatch, json_file, tmp_path
    ):
        from json_classgen.codegen import interactive

        target = tmp_path / "Root.java"
        answers = ["1", "2", "Root", "save", str(target), "b"]
        monkeypatch.setattr(
            interactive.Prompt, "ask", lambda *args, **kwargs: answers.pop(0)
        )

        exit_code = main(
            [str(json_file('{"id": 1}')), "--interactive", "--indent-size", "2"]
        )

        assert exit_code == 0
        assert "\n  private double id;\n" in target.read_text(encoding="utf-8")
