"""
Tests for generator configuration.
"""

from config_schema_generator.config import GeneratorConfig, SchemaMode, WriterConfig


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.owned_sources == ["OPS", "DocFX"]
        assert config.docsets_property == "docsets_to_publish"
        assert config.writer.indent == 2

    def test_from_dict(self):
        config = GeneratorConfig.from_dict({"owned_sources": ["OPS"], "writer": {"indent": 4}, "unknown": 1})
        assert config.owned_sources == ["OPS"]
        assert config.writer.indent == 4
        assert not hasattr(config, "unknown")

    def test_to_dict_round_trip(self):
        config = GeneratorConfig(ops_source="Ops", writer=WriterConfig(ensure_ascii=True))
        assert GeneratorConfig.from_dict(config.to_dict()) == config


class TestWriterConfig:
    def test_standard_mode_ignores_defaults(self):
        config = WriterConfig(indent=4)
        standard = config.for_mode(SchemaMode.STANDARD)
        assert standard.ignore_default_values is True
        assert standard.indent == 4

    def test_extension_mode_keeps_defaults(self):
        config = WriterConfig(ignore_default_values=True)
        assert config.for_mode(SchemaMode.EXTENSION).ignore_default_values is False

    def test_for_mode_returns_copy(self):
        config = WriterConfig()
        config.for_mode(SchemaMode.STANDARD)
        assert config.ignore_default_values is False
