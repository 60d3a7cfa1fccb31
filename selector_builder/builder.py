from selector_builder.selector_state import SelectorState, combine_states


class SelectorBuilder:
    """
    Stateless facade that starts new selector chains.

    Holds no selector of its own: every call begins from a fresh empty
    SelectorState, so one builder can be reused anywhere.

        builder = SelectorBuilder()
        builder.id('main').class_('container').class_('editable').stringify()
        # '#main.container.editable'
    """

    @staticmethod
    def create() -> SelectorState:
        """Return the empty selector"""
        return SelectorState()

    def element(self, value: str) -> SelectorState:
        return self.create().element(value)

    def id(self, value: str) -> SelectorState:
        return self.create().id(value)

    def class_(self, value: str) -> SelectorState:
        return self.create().class_(value)

    def attr(self, value: str) -> SelectorState:
        return self.create().attr(value)

    def pseudo_class(self, value: str) -> SelectorState:
        return self.create().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorState:
        return self.create().pseudo_element(value)

    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    @staticmethod
    def combine(left: SelectorState, combinator: str, right: SelectorState) -> SelectorState:
        return combine_states(left, combinator, right)

    @staticmethod
    def stringify(state: SelectorState) -> str:
        return state.text


css_selector_builder = SelectorBuilder()

combine = SelectorBuilder.combine
stringify = SelectorBuilder.stringify
