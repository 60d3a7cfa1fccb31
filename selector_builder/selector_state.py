from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, Optional

from selector_builder.errors import DuplicateFragmentError, OrderError
from selector_builder.utils import get_logger

logger = get_logger(__name__)


class SelectorCategory(Enum):
    """Kinds of selector fragments, declared in the order CSS requires them."""
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

    @property
    def rank(self) -> int:
        return CATEGORY_ORDER.index(self)

    @property
    def single_use(self) -> bool:
        return self in SINGLE_USE_CATEGORIES


CATEGORY_ORDER = list(SelectorCategory)

SINGLE_USE_CATEGORIES = frozenset({
    SelectorCategory.ELEMENT,
    SelectorCategory.ID,
    SelectorCategory.PSEUDO_ELEMENT,
})


@dataclass(frozen=True)
class SelectorState:
    """
    One immutable step of a selector chain.

    Every fragment method returns a new SelectorState and leaves the
    receiver untouched, so a state can be shared between chains and
    passed to combine() safely.
    """
    text: str = ""
    last_category: Optional[SelectorCategory] = None
    used: FrozenSet[SelectorCategory] = field(default_factory=frozenset)

    # ==================== FRAGMENTS ====================

    def element(self, value: str) -> "SelectorState":
        return self._append(SelectorCategory.ELEMENT, value)

    def id(self, value: str) -> "SelectorState":
        return self._append(SelectorCategory.ID, f"#{value}")

    def class_(self, value: str) -> "SelectorState":
        return self._append(SelectorCategory.CLASS, f".{value}")

    def attr(self, value: str) -> "SelectorState":
        """
        Input: value - raw attribute syntax, e.g. 'href$=".png"'
        Output: new state with '[value]' appended
        """
        return self._append(SelectorCategory.ATTRIBUTE, f"[{value}]")

    def pseudo_class(self, value: str) -> "SelectorState":
        return self._append(SelectorCategory.PSEUDO_CLASS, f":{value}")

    def pseudo_element(self, value: str) -> "SelectorState":
        return self._append(SelectorCategory.PSEUDO_ELEMENT, f"::{value}")

    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    # ==================== RENDERING ====================

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    # ==================== VALIDATION ====================

    def _append(self, category: SelectorCategory, fragment: str) -> "SelectorState":
        self._check_order(category)
        self._check_duplicate(category)

        used = self.used | {category} if category.single_use else self.used
        return replace(
            self,
            text=f"{self.text}{fragment}",
            last_category=category,
            used=used,
        )

    def _check_order(self, category: SelectorCategory) -> None:
        if self.last_category is not None and self.last_category.rank > category.rank:
            logger.debug(
                f"Rejected {category.value} after {self.last_category.value} in '{self.text}'"
            )
            raise OrderError(category, self.last_category)

    def _check_duplicate(self, category: SelectorCategory) -> None:
        if category.single_use and category in self.used:
            logger.debug(f"Rejected second {category.value} in '{self.text}'")
            raise DuplicateFragmentError(category)


def combine_states(left: SelectorState, combinator: str, right: SelectorState) -> SelectorState:
    """
    Join two selectors with a combinator (' ', '>', '+', '~').

    The result starts with fresh ordering and duplicate tracking.
    """
    return SelectorState(text=f"{left.text} {combinator} {right.text}")
