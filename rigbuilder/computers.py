"""Finished computers: desktops, laptops and tablets for PC and Mac."""

from __future__ import annotations

from .components import Battery, Case, PowerSupply
from .motherboard import AppleMotherBoard, PCMotherBoard

_SPECS_HEADER = "\nSpecs\n"


class Computer:
    """A device with a case and a total cost."""

    def __init__(self, case: Case | None, cost: float = 0.0) -> None:
        self.case = case
        self.cost = cost

    def describe(self) -> str:
        """A bare computer lists no specs."""
        return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(case={self.case!r}, cost={self.cost!r})"


class PCDesktop(Computer):
    """A PC tower powered from the mains."""

    def __init__(
        self,
        motherboard: PCMotherBoard,
        case: Case,
        power_supply: PowerSupply,
        cost: float,
    ) -> None:
        super().__init__(case, cost)
        self.motherboard = motherboard
        self.power_supply = power_supply

    def describe(self) -> str:
        return (
            _SPECS_HEADER
            + self.motherboard.describe()
            + self.power_supply.describe()
            + self.case.describe()
        )


class PCLaptop(Computer):
    """A PC laptop in a mini case, running on a battery."""

    def __init__(
        self,
        motherboard: PCMotherBoard,
        case_color: str,
        battery: Battery,
        cost: float,
    ) -> None:
        super().__init__(Case("ATX-Mini", case_color), cost)
        self.motherboard = motherboard
        self.battery = battery

    def describe(self) -> str:
        return (
            _SPECS_HEADER
            + self.motherboard.describe()
            + self.battery.describe()
            + self.case.describe()
        )


class PCTablet(Computer):
    """A PC tablet in a micro case, running on a battery."""

    def __init__(
        self,
        motherboard: PCMotherBoard,
        case_color: str,
        battery: Battery,
        cost: float,
    ) -> None:
        super().__init__(Case("ATX-Micro", case_color), cost)
        self.motherboard = motherboard
        self.battery = battery

    def describe(self) -> str:
        return (
            _SPECS_HEADER
            + self.motherboard.describe()
            + self.battery.describe()
            + self.case.describe()
        )


class MacDesktop(Computer):
    """A Mac desktop powered from the mains."""

    def __init__(
        self,
        motherboard: AppleMotherBoard,
        case: Case,
        power_supply: PowerSupply,
        cost: float,
    ) -> None:
        super().__init__(case, cost)
        self.motherboard = motherboard
        self.power_supply = power_supply

    def describe(self) -> str:
        return (
            _SPECS_HEADER
            + self.motherboard.describe()
            + self.power_supply.describe()
            + self.case.describe()
        )


class MacLaptop(Computer):
    """A Mac laptop in a mini case, running on a battery."""

    def __init__(
        self,
        motherboard: AppleMotherBoard,
        case_color: str,
        battery: Battery,
        cost: float,
    ) -> None:
        super().__init__(Case("ATX-Mini", case_color), cost)
        self.motherboard = motherboard
        self.battery = battery

    def describe(self) -> str:
        return (
            _SPECS_HEADER
            + self.motherboard.describe()
            + self.battery.describe()
            + self.case.describe()
        )


class IPad(Computer):
    """An Apple tablet in a micro case, running on a battery."""

    def __init__(
        self,
        motherboard: AppleMotherBoard,
        case_color: str,
        battery: Battery,
        cost: float,
    ) -> None:
        super().__init__(Case("ATX-Micro", case_color), cost)
        self.motherboard = motherboard
        self.battery = battery

    def describe(self) -> str:
        return (
            _SPECS_HEADER
            + self.motherboard.describe()
            + self.battery.describe()
            + self.case.describe()
        )