from typing import Optional

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webelement import WebElement

from selector_builder.builder import SelectorBuilder, css_selector_builder
from selector_builder.escaping import attribute_spec, css_escape
from selector_builder.selector_state import SelectorState
from selector_builder.utils import get_logger

logger = get_logger(__name__)

READ_ATTRIBUTES_SCRIPT = """
const attrs = {};
for (const attr of arguments[0].attributes) {
    attrs[attr.name] = attr.value;
}
return attrs;
"""


def read_attributes(web_element: WebElement) -> dict:
    driver = web_element.parent
    return dict(driver.execute_script(READ_ATTRIBUTES_SCRIPT, web_element) or {})


def selector_from_webelement(
    web_element: WebElement,
    builder: Optional[SelectorBuilder] = None
) -> SelectorState:
    """
    Build a selector describing a live element.

    Ids, class names and attribute names are CSS-escaped and attribute
    values are double-quoted, so the result is accepted by find_element
    even for names like "1abc" or "md:flex".

    Input: web_element - element whose tag and attributes are read
    Output: SelectorState like div#main.card.item[data-index="3"]
    """
    builder = builder or css_selector_builder
    attrs = read_attributes(web_element)

    state = builder.element(web_element.tag_name.lower())

    element_id = attrs.pop("id", "").strip()
    if element_id:
        state = state.id(css_escape(element_id))

    for cls in attrs.pop("class", "").split():
        state = state.class_(css_escape(cls))

    for key, value in sorted(attrs.items()):
        state = state.attr(attribute_spec(key, str(value)))

    logger.debug(f"Built selector {state.text} from <{web_element.tag_name}>")
    return state


def matches_css_selector(element: WebElement, selector) -> bool:
    """
    Check if a WebElement matches a CSS selector.
    Accepts a plain string or anything that renders to one (SelectorState).
    """
    try:
        driver = element.parent
        result = driver.execute_script(
            "return arguments[0].matches(arguments[1]);",
            element,
            str(selector)
        )
        return bool(result)
    except WebDriverException as e:
        logger.debug(f"Could not match '{selector}': {e.msg}")
        return False
