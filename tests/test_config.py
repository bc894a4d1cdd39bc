import yaml

from ewclassifiers.config import (
    InputOptions,
    OutputOptions,
    ProxyOptions,
    QueryOptions,
    load_options,
    load_settings,
    yaml_key,
)


def test_yaml_keys_are_camel_case():
    assert yaml_key("filter_definitions_without_examples") == "filterDefinitionsWithoutExamples"
    assert yaml_key("query_for_unknown_words") == "queryForUnknownWords"
    assert yaml_key("https_proxy") == "httpsProxy"


def test_missing_files_are_created_with_defaults(tmp_path):
    settings = load_settings(tmp_path)

    assert settings.output == OutputOptions()
    assert settings.query == QueryOptions()
    assert settings.proxy == ProxyOptions()
    assert settings.input == InputOptions()
    written = yaml.safe_load((tmp_path / "outputConfig.yml").read_text(encoding="utf-8"))
    assert written["generateExampleSentences"] is True
    assert written["maxExampleSentences"] == 0
    assert (tmp_path / "queryConfig.yml").exists()
    assert (tmp_path / "proxy.yml").exists()
    assert (tmp_path / "inputConfig.yml").exists()


def test_partial_file_keeps_defaults_for_missing_keys(tmp_path):
    path = tmp_path / "outputConfig.yml"
    path.write_text("generateExampleSentences: false\nmaxExampleSentences: 2\n", encoding="utf-8")

    options = load_options(path, OutputOptions)

    assert options.generate_example_sentences is False
    assert options.max_example_sentences == 2
    assert options.include_phonetic is True


def test_invalid_values_fall_back_to_defaults(tmp_path):
    path = tmp_path / "outputConfig.yml"
    path.write_text("includeOrigin: maybe\nmaxExampleSentences: -3\n", encoding="utf-8")

    options = load_options(path, OutputOptions)

    assert options.include_origin is True
    assert options.max_example_sentences == 0


def test_invalid_yaml_uses_defaults(tmp_path):
    path = tmp_path / "queryConfig.yml"
    path.write_text("queryForUnknownWords: [unclosed\n", encoding="utf-8")
    assert load_options(path, QueryOptions) == QueryOptions()


def test_non_mapping_uses_defaults(tmp_path):
    path = tmp_path / "proxy.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    assert load_options(path, ProxyOptions) == ProxyOptions()


def test_proxy_and_input_values(tmp_path):
    (tmp_path / "proxy.yml").write_text("httpProxy: http://127.0.0.1:8080\n", encoding="utf-8")
    (tmp_path / "inputConfig.yml").write_text("inputDirectory: books\n", encoding="utf-8")

    settings = load_settings(tmp_path)

    assert settings.proxy.http_proxy == "http://127.0.0.1:8080"
    assert settings.proxy.https_proxy == ""
    assert settings.input.input_directory == "books"
