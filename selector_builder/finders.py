from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, Union

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By

from selector_builder.selector_state import SelectorState
from selector_builder.utils import get_logger

logger = get_logger(__name__)

Selector = Union[str, SelectorState]

BY_MAPPING = {
    "ID": By.ID,
    "NAME": By.NAME,
    "XPATH": By.XPATH,
    "LINK_TEXT": By.LINK_TEXT,
    "PARTIAL_LINK_TEXT": By.PARTIAL_LINK_TEXT,
    "TAG_NAME": By.TAG_NAME,
    "CLASS_NAME": By.CLASS_NAME,
    "CSS_SELECTOR": By.CSS_SELECTOR,
}


class Searchable(Protocol):
    """Anything with Selenium's lookup methods: a driver or a WebElement"""

    def find_element(self, by: str, value: str) -> "Searchable":
        ...

    def find_elements(self, by: str, value: str) -> List["Searchable"]:
        ...


class ElementFinder(ABC):
    """Looks up built selectors under a parent; swap for a Mock in tests"""

    @abstractmethod
    def find_single(self, parent: Searchable, selector: Selector, by_suffix: str = "CSS_SELECTOR") -> Optional[Searchable]:
        pass

    @abstractmethod
    def find_multiple(self, parent: Searchable, selector: Selector, by_suffix: str = "CSS_SELECTOR") -> List[Searchable]:
        pass


class SeleniumElementFinder(ElementFinder):
    """Renders the selector and hands it to Selenium"""

    def _resolve_by(self, by_suffix: str) -> str:
        """Convert a string like 'XPATH' or 'CSS_SELECTOR' into By.XPATH, etc."""
        by_suffix = by_suffix.upper()
        if by_suffix not in BY_MAPPING:
            raise ValueError(f"Invalid by_suffix: {by_suffix}")
        return BY_MAPPING[by_suffix]

    def find_single(
        self,
        parent: Searchable,
        selector: Selector,
        by_suffix: str = "CSS_SELECTOR"
    ) -> Optional[Searchable]:
        by = self._resolve_by(by_suffix)
        logger.debug(f"find_single {by}: {selector}")
        try:
            return parent.find_element(by, str(selector))
        except NoSuchElementException:
            return None

    def find_multiple(
        self,
        parent: Searchable,
        selector: Selector,
        by_suffix: str = "CSS_SELECTOR"
    ) -> List[Searchable]:
        by = self._resolve_by(by_suffix)
        logger.debug(f"find_multiple {by}: {selector}")
        return list(parent.find_elements(by, str(selector)))
