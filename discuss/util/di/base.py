"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a mock implementation for tests
Component = Literal["remote", "notifications"]


class ProviderBase(Provider):
    """Provider carrying mock-selection metadata.

    Attributes:
        __mock_component__: Name used to unmock the component in tests,
            None for providers that are always real
        __is_mock__: Whether this subclass is the test implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
