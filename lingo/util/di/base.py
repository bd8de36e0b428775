"""Provider base class and the names of swappable components."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and an in-memory implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every Lingo provider.

    A provider listed in PROVIDERS that has subclasses is a swappable
    component: it names itself in __mock_component__ and each subclass
    sets __is_mock__ to say which implementation it is. Providers without
    subclasses are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
