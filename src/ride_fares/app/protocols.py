from typing import Protocol, runtime_checkable


@runtime_checkable
class Fare(Protocol):
    """
    Capability shared by every ride tier.
    • fare(): pure function of the stored distance (and tier options).
    • describe(): one-line summary with the fare to two decimals.
    """

    id: int

    def fare(self) -> float: ...
    def describe(self) -> str: ...
