import io
import logging

from rich.console import Console

from json_classgen.logging_config import (
    ROOT_LOGGER_NAME,
    configure_logging,
    get_logger,
)


class TestLogging:
    """Test logger naming and handler setup"""

    def test_get_logger_namespaces(self):
        assert get_logger("json_classgen.utils").name == "json_classgen.utils"
        assert get_logger("tests").name == "json_classgen.tests"
        assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME

    def test_configure_logging_installs_single_handler(self):
        output = io.StringIO()
        configure_logging("info", console=Console(file=output, width=200))
        configure_logging("info", console=Console(file=output, width=200))

        root = logging.getLogger(ROOT_LOGGER_NAME)
        get_logger("tests").info("loaded sample")

        assert len(root.handlers) == 1
        assert root.level == logging.INFO
        assert "loaded sample" in output.getvalue()

    def test_pipeline_messages(self, person_data):
        from json_classgen.analyzer import infer_schema
        from json_classgen.codegen import generate_code, get_generator

        output = io.StringIO()
        configure_logging("debug", console=Console(file=output, width=200))

        infer_schema(person_data, "Person")
        generate_code(get_generator("python"), infer_schema(42, "Root"))

        text = output.getvalue()
        assert "Inferred 2 record(s) for root Person: Person, Address" in text
        assert "python generation failed: Cannot generate python classes" in text
