from typing import Optional


class SelectorError(Exception):
    """Simple selector error with message"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class DuplicateFragmentError(SelectorError):
    """Raised when element, id or pseudo-element is appended twice to one chain"""

    def __init__(self, category):
        self.category = category
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time inside the selector"
        )


class OrderError(SelectorError):
    """Raised when a fragment comes after a fragment of a higher rank"""

    def __init__(self, category, previous: Optional[object] = None):
        self.category = category
        self.previous = previous
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
