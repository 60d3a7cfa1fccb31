import json
import logging

import pytest
from pydantic import ValidationError

from selector_builder.config.selector_config import SelectorConfig, SelectorDefinition
from selector_builder.errors import OrderError
from selector_builder.utils import load_json_from_project


@pytest.fixture
def sample_config():
    return {
        "log_level": "debug",
        "selectors": {
            "exam_card": {
                "tag": "div",
                "id": "exams",
                "classes": ["card", "item"],
                "attrs": {"data-index": "3"},
                "pseudo_classes": ["hover"],
                "pseudo_element": "after"
            },
            "link": {"tag": "a", "attrs": {"target": "_blank"}}
        }
    }


@pytest.fixture
def config_file(tmp_path, sample_config):
    path = tmp_path / "configs" / "selectors.json"
    path.parent.mkdir()
    path.write_text(json.dumps(sample_config), encoding="utf-8")
    return path


# ==================== TEST SELECTOR DEFINITION ====================

class TestSelectorDefinition:
    """Tests for building selectors from definitions"""

    def test_build_full_definition(self, sample_config):
        """Should emit fragments in category order regardless of key order"""
        definition = SelectorDefinition(**sample_config["selectors"]["exam_card"])
        assert definition.build().stringify() == "div#exams.card.item[data-index='3']:hover::after"

    def test_build_empty_definition(self):
        """Should build the empty selector"""
        assert SelectorDefinition().build().stringify() == ""

    def test_build_classes_only(self):
        """Should skip missing tag and id"""
        assert SelectorDefinition(classes=["a", "b"]).build().stringify() == ".a.b"

    def test_quote_in_attribute_value_is_escaped(self):
        """Should escape single quotes inside attribute values"""
        definition = SelectorDefinition(tag="a", attrs={"title": "it's"})
        assert definition.build().stringify() == "a[title='it\\'s']"

    def test_id_and_classes_are_escaped(self):
        """Should escape ids and class names that are not plain identifiers"""
        definition = SelectorDefinition(id="2024", classes=["md:flex"])
        assert definition.build().stringify() == "#\\32 024.md\\:flex"


# ==================== TEST SELECTOR CONFIG ====================

class TestSelectorConfig:
    """Tests for SelectorConfig loading and lookup"""

    def test_from_json_direct_path(self, config_file, tmp_path):
        """Should load a config from a relative path"""
        config = SelectorConfig.from_json("configs/selectors.json", project_root=str(tmp_path))
        assert set(config.selectors) == {"exam_card", "link"}
        assert config.log_level == "DEBUG"

    def test_from_json_by_filename(self, config_file, tmp_path):
        """Should find a config by file name inside the project"""
        config = SelectorConfig.from_json("selectors.json", project_root=str(tmp_path))
        assert config.build("link").stringify() == "a[target='_blank']"

    def test_missing_file(self, tmp_path):
        """Should raise FileNotFoundError when the file is nowhere in the project"""
        with pytest.raises(FileNotFoundError):
            SelectorConfig.from_json("missing.json", project_root=str(tmp_path))

    def test_duplicate_file_names(self, tmp_path):
        """Should refuse to pick between two files with the same name"""
        for folder in ("a", "b"):
            (tmp_path / folder).mkdir()
            (tmp_path / folder / "selectors.json").write_text("{}", encoding="utf-8")
        with pytest.raises(FileExistsError):
            load_json_from_project("selectors.json", project_root=str(tmp_path))

    def test_defaults(self):
        """Should default to INFO and no selectors"""
        config = SelectorConfig()
        assert config.log_level == "INFO"
        assert config.selectors == {}

    def test_unknown_selector(self):
        """Should raise KeyError for an unknown name"""
        with pytest.raises(KeyError):
            SelectorConfig().build("nope")

    def test_invalid_content(self):
        """Should reject definitions with the wrong types"""
        with pytest.raises(ValidationError):
            SelectorConfig.model_validate({"selectors": {"bad": {"classes": "not-a-list"}}})

    def test_apply_logging(self, sample_config, package_logger):
        """Should set the package logger level and print through one stream handler"""
        SelectorConfig.model_validate(sample_config).apply_logging()

        assert package_logger.level == logging.DEBUG
        assert [type(h) for h in package_logger.handlers] == [logging.StreamHandler]
        assert package_logger.propagate is False

    @pytest.mark.parametrize("level", ["verbose", "", "trace"])
    def test_unknown_log_level_rejected_on_load(self, level):
        """Should reject unknown log levels when the config is validated"""
        with pytest.raises(ValidationError):
            SelectorConfig.model_validate({"log_level": level})

    def test_log_level_is_case_insensitive(self):
        """Should upper-case the log level"""
        assert SelectorConfig.model_validate({"log_level": "warning"}).log_level == "WARNING"

    def test_build_keeps_errors(self):
        """Should surface builder errors for impossible definitions"""
        config = SelectorConfig.model_validate({"selectors": {"ok": {"tag": "div"}}})
        with pytest.raises(OrderError):
            config.build("ok").class_("x").element("span")
