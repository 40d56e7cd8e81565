from typing import Iterable, Sequence


class LocalizationError(Exception):
    """Base class for every failure raised while loading or resolving tables."""


class MissingKeyError(LocalizationError, KeyError):
    """
    Lookup miss: the identifier is not a message in any searched table.
    """
    def __init__(self, identifier: str, locales: Sequence[str] = ()):
        self.identifier = identifier
        self.locales = tuple(locales)
        super().__init__(identifier)

    def __str__(self) -> str:
        if self.locales:
            return f"Unknown message '{self.identifier}' (searched: {', '.join(self.locales)})"
        return f"Unknown message '{self.identifier}'"


class FtlSyntaxError(LocalizationError):
    def __init__(self, message: str, resource: str, line_number: int, line: str = ""):
        self.resource = resource
        self.line_number = line_number
        self.line = line
        super().__init__(f"{resource}:{line_number}: {message}")


class DuplicateIdentifierError(LocalizationError):
    def __init__(self, identifier: str, resource: str, line_number: int):
        self.identifier = identifier
        self.resource = resource
        self.line_number = line_number
        super().__init__(f"{resource}:{line_number}: '{identifier}' is already defined")


class DanglingReferenceError(LocalizationError):
    def __init__(self, identifier: str, reference: str):
        self.identifier = identifier
        self.reference = reference
        super().__init__(f"'{identifier}' references unknown entry '{reference}'")


class CyclicReferenceError(LocalizationError):
    def __init__(self, chain: Iterable[str]):
        self.chain = tuple(chain)
        super().__init__(f"Cyclic reference: {' -> '.join(self.chain)}")


class ResourceNotFoundError(LocalizationError):
    def __init__(self, locale: str, path: str):
        self.locale = locale
        self.path = path
        super().__init__(f"No resources for locale '{locale}' in {path}")
