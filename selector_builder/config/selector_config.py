from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from selector_builder.builder import SelectorBuilder, css_selector_builder
from selector_builder.escaping import attribute_spec, css_escape
from selector_builder.selector_state import SelectorState
from selector_builder.utils import enable_console_logging, get_logger, load_json_from_project

logger = get_logger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SelectorDefinition(BaseModel):
    """
    One named selector, described field by field like a template.

    id, classes and attribute names are CSS-escaped and attribute values
    single-quoted; tag and pseudo names are used as written.
    """
    tag: Optional[str] = None
    id: Optional[str] = None
    classes: List[str] = Field(default_factory=list)
    attrs: Dict[str, str] = Field(default_factory=dict)
    pseudo_classes: List[str] = Field(default_factory=list)
    pseudo_element: Optional[str] = None

    def build(self, builder: Optional[SelectorBuilder] = None) -> SelectorState:
        state = (builder or css_selector_builder).create()
        if self.tag:
            state = state.element(self.tag)
        if self.id:
            state = state.id(css_escape(self.id))
        for cls in self.classes:
            state = state.class_(css_escape(cls))
        for key, value in self.attrs.items():
            state = state.attr(attribute_spec(key, value, quote="'"))
        for pseudo in self.pseudo_classes:
            state = state.pseudo_class(pseudo)
        if self.pseudo_element:
            state = state.pseudo_element(self.pseudo_element)
        return state


class SelectorConfig(BaseModel):
    log_level: LogLevel = "INFO"
    selectors: Dict[str, SelectorDefinition] = Field(default_factory=dict)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_json(cls, config_path: str, project_root: Optional[str] = None) -> "SelectorConfig":
        return cls.model_validate(load_json_from_project(config_path, project_root))

    def apply_logging(self) -> None:
        """Print package records to the console at the configured level"""
        enable_console_logging(self.log_level)

    def build(self, name: str, builder: Optional[SelectorBuilder] = None) -> SelectorState:
        """
        Input: name - key under "selectors"
        Output: SelectorState for that definition
        """
        if name not in self.selectors:
            raise KeyError(f"Unknown selector: {name}")
        state = self.selectors[name].build(builder)
        logger.debug(f"Built '{name}' -> {state.text}")
        return state
