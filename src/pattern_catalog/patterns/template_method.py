"""Template Method: a fixed algorithm skeleton with overridable steps.

Required steps are abstract methods; optional steps ("hooks") have empty
defaults that subclasses may override.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.collaborators import AuthorizationStatus, CannedAuthorization
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category


# ---------------------------------------------------------------------------
# Conceptual
# ---------------------------------------------------------------------------

class AbstractClass(ABC):
    def __init__(self, console: Console) -> None:
        self.console = console

    def template_method(self) -> None:
        """The skeleton. Subclasses leave this alone."""
        self.base_operation1()
        self.required_operation1()
        self.base_operation2()
        self.hook1()
        self.required_operation2()
        self.base_operation3()
        self.hook2()

    def base_operation1(self) -> None:
        self.console.print("AbstractClass says: I am doing the bulk of the work")

    def base_operation2(self) -> None:
        self.console.print("AbstractClass says: But I let subclasses override some operations")

    def base_operation3(self) -> None:
        self.console.print("AbstractClass says: But I am doing the bulk of the work anyway")

    @abstractmethod
    def required_operation1(self) -> None: ...

    @abstractmethod
    def required_operation2(self) -> None: ...

    def hook1(self) -> None:
        pass

    def hook2(self) -> None:
        pass


class ConcreteClass1(AbstractClass):
    def required_operation1(self) -> None:
        self.console.print("ConcreteClass1 says: Implemented Operation1")

    def required_operation2(self) -> None:
        self.console.print("ConcreteClass1 says: Implemented Operation2")

    def hook2(self) -> None:
        self.console.print("ConcreteClass1 says: Overridden Hook2")


class ConcreteClass2(AbstractClass):
    def required_operation1(self) -> None:
        self.console.print("ConcreteClass2 says: Implemented Operation1")

    def required_operation2(self) -> None:
        self.console.print("ConcreteClass2 says: Implemented Operation2")

    def hook1(self) -> None:
        self.console.print("ConcreteClass2 says: Overridden Hook1")


def client_code(obj: AbstractClass) -> None:
    obj.template_method()


class TemplateMethodExample(BaseExample):
    name = "Template Method"
    category = Category.BEHAVIORAL
    summary = "Two subclasses fill in the same algorithm skeleton differently"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        for cls in (ConcreteClass1, ConcreteClass2):
            console.print("Same client code can work with different subclasses:")
            client_code(cls(console))


# ---------------------------------------------------------------------------
# Permission accessors
# ---------------------------------------------------------------------------

Completion = Callable[[bool], None]


class PermissionAccessor(ABC):
    """Skeleton for asking a device permission once.

    ``has_access`` and ``request_access`` are required; the three
    ``will_/did_`` hooks are optional.
    """

    description = "PermissionAccessor"

    def __init__(self, service: CannedAuthorization, console: Console) -> None:
        self.service = service
        self.console = console

    def request_access_if_needed(self, completion: Completion) -> None:
        if self.has_access():
            completion(True)
            return

        self.will_receive_access()

        def on_status(status: bool) -> None:
            if status:
                self.did_receive_access()
            else:
                self.did_reject_access()
            completion(status)

        self.request_access(on_status)

    @abstractmethod
    def request_access(self, completion: Completion) -> None: ...

    @abstractmethod
    def has_access(self) -> bool: ...

    # Hooks
    def will_receive_access(self) -> None:
        pass

    def did_receive_access(self) -> None:
        pass

    def did_reject_access(self) -> None:
        pass


class _ServiceAccessor(PermissionAccessor):
    def request_access(self, completion: Completion) -> None:
        self.service.request_access(completion)

    def has_access(self) -> bool:
        return self.service.authorization_status() == AuthorizationStatus.AUTHORIZED


class CameraAccessor(_ServiceAccessor):
    description = "Camera"


class MicrophoneAccessor(_ServiceAccessor):
    description = "Microphone"


class PhotoLibraryAccessor(_ServiceAccessor):
    description = "PhotoLibrary"

    def did_receive_access(self) -> None:
        self.console.print("PhotoLibrary Accessor: Receive access. Updating analytics...")

    def did_reject_access(self) -> None:
        self.console.print("PhotoLibrary Accessor: Rejected with access. Updating analytics...")


class PermissionTemplateExample(BaseExample):
    name = "Template Method (permissions)"
    category = Category.BEHAVIORAL
    summary = "Camera, microphone and photo accessors share one request flow"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        accessors: list[PermissionAccessor] = [
            CameraAccessor(CannedAuthorization(AuthorizationStatus.AUTHORIZED), console),
            MicrophoneAccessor(CannedAuthorization(grants=True), console),
            PhotoLibraryAccessor(CannedAuthorization(grants=False), console),
        ]

        for accessor in accessors:

            def report(status: bool, item: PermissionAccessor = accessor) -> None:
                prefix = "You have access to " if status else "You do not have access to "
                console.print(prefix + item.description)

            accessor.request_access_if_needed(report)

        console.check(
            accessors[0].service.requests == 0,
            "Already-authorized camera is not asked again",
        )
