"""Provider base class shared by all AskIt providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with an in-memory twin that tests can swap in
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Dishka provider carrying the metadata ``get_provider`` selects on.

    Attributes:
        __mock_component__: Component name on mockable bases, None on concrete providers
        __is_mock__: True on the in-memory implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
