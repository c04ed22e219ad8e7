"""Interactive selection of the parts shared by every kind of computer."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import ClassVar, TextIO, TypeVar

from .components import (
    Battery,
    Case,
    MainMemory,
    NetworkCard,
    PhysicalMemory,
    PowerSupply,
    StorageDevice,
)
from .computers import Computer

_T = TypeVar("_T")

_DESKTOP_STORAGE = (
    ("256GB HDD", "HDD", 256, 100),
    ("512GB HDD", "HDD", 512, 150),
    ("1TB HDD", "HDD", 1024, 200),
    ("256GB SSD", "SSD", 256, 150),
    ("512GB SSD", "SSD", 512, 200),
    ("1TB SSD", "SSD", 1024, 250),
)

_TABLET_STORAGE = (
    ("64GB HDD", "HDD", 64, 30),
    ("128GB HDD", "HDD", 128, 50),
    ("256GB HDD", "HDD", 256, 95),
    ("64GB SSD", "SSD", 64, 40),
    ("128GB SSD", "SSD", 128, 70),
    ("256GB SSD", "SSD", 256, 135),
)

_NETWORK_CARDS = (
    ("Wifi 15 Mbps", "Wifi", 15, 40),
    ("Wifi 30 Mbps", "Wifi", 30, 80),
    ("Ethernet 50 Mbps", "Ethernet", 50, 100),
    ("Ethernet 75 Mbps", "EThernet", 75, 200),
)

_CASE_COLORS = ("Black", "Silver", "White")

_PSU_TIERS = (
    ("80 plus bronze", "80 PLUS Bronze"),
    ("80 plus silver", "80 PLUS Silver"),
    ("80 plus gold", "80 PLUS Gold"),
)
_PSU_HIGH_PRICES = (100, 120, 140)
_PSU_LOW_PRICES = (60, 80, 100)


class ComputerAssembly:
    """Asks for parts on a text stream and keeps a running total of their cost."""

    _BUILDERS: ClassVar[dict[int, str]] = {}

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.total_cost: float = 0.0
        self.power_supply: PowerSupply | None = None
        self.battery: Battery | None = None
        self.network_card: NetworkCard | None = None
        self.storage_device: StorageDevice | None = None
        self.case: Case | None = None
        self.ram: MainMemory | None = None
        self.physical_memory: PhysicalMemory | None = None
        self._tokens = self._read_tokens()

    def _read_tokens(self) -> Iterator[str]:
        for line in self.stdin:
            yield from line.split()

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def read_choice(self) -> int:
        """Return the next whole number from the input, skipping anything else."""
        for token in self._tokens:
            try:
                return int(token)
            except ValueError:
                continue
        raise EOFError("input ended before a choice was made")

    def _pick(self, options: Sequence[_T], error: str) -> _T:
        while True:
            choice = self.read_choice()
            if 1 <= choice <= len(options):
                return options[choice - 1]
            self._write(error)

    def create_storage_device(self, tablet: bool = False) -> StorageDevice:
        """Offer the storage options (smaller ones for tablets) and return the pick."""
        options = _TABLET_STORAGE if tablet else _DESKTOP_STORAGE
        menu = "".join(
            f"{number}. {label}  for ${price}\n"
            for number, (label, _, _, price) in enumerate(options, start=1)
        )
        self._write("\nChoose the specs for your Storage Device\n" + menu + "\n")
        _, kind, capacity, price = self._pick(
            options, "Please choose from the given options\n"
        )
        self.total_cost += price
        return StorageDevice(kind, capacity, price)

    def create_network_card(self) -> NetworkCard:
        """Offer the network cards and return the pick."""
        menu = "".join(
            f"{number}. {label} for {price}$\n"
            for number, (label, _, _, price) in enumerate(_NETWORK_CARDS, start=1)
        )
        self._write("\nchoose your Network Card\n" + menu + "\n")
        _, kind, speed, price = self._pick(
            _NETWORK_CARDS, "Please choose from the given options"
        )
        self.total_cost += price
        return NetworkCard(kind, speed, price)

    def choose_case_color(self) -> str:
        """Offer the case colours and return the one picked."""
        menu = "".join(
            f"{number}. {color}\n" for number, color in enumerate(_CASE_COLORS, start=1)
        )
        self._write("Choose a color for your case\n" + menu + "\n")
        return self._pick(_CASE_COLORS, "Please choose from the given options\n")

    def create_power_supply(self, option1: int, option2: int) -> PowerSupply:
        """Offer three ratings at each of two wattages and return the pick."""
        options = [
            (option1, rating, price)
            for (_, rating), price in zip(_PSU_TIERS, _PSU_HIGH_PRICES)
        ] + [
            (option2, rating, price)
            for (_, rating), price in zip(_PSU_TIERS, _PSU_LOW_PRICES)
        ]
        lines = ["\nChoose your PowerCable\n", f"{option1} watt options:\n"]
        for number, ((label, _), price) in enumerate(
            zip(_PSU_TIERS, _PSU_HIGH_PRICES), start=1
        ):
            lines.append(f"{number}. {label} for ${price}\n")
        lines.append(f"{option2} watt options:\n")
        for number, ((label, _), price) in enumerate(
            zip(_PSU_TIERS, _PSU_LOW_PRICES), start=len(_PSU_TIERS) + 1
        ):
            lines.append(f"{number}. {label} for ${price}\n")
        self._write("".join(lines) + "\n")
        wattage, rating, price = self._pick(options, "Choose from the given options:")
        self.total_cost += price
        return PowerSupply(wattage, rating, price)

    def create_battery(self, lower_limit: int, upper_limit: int) -> Battery:
        """Ask for a capacity in steps of 2000 mAh within the limits."""
        self._write(
            f"\nHow much Battery do you need? ({lower_limit}mAh - {upper_limit}mAh): "
        )
        while True:
            choice = self.read_choice()
            if choice % 2000 == 0 and lower_limit <= choice <= upper_limit:
                battery = Battery(choice, 0.005 * choice)
                self.total_cost += battery.price
                self._write(f"Cost is ${battery.price:g}\n")
                return battery
            self._write("Choose a valid number\n")

    def create_main_memory(
        self, lower_limit: int, upper_limit: int, chip_size: int
    ) -> MainMemory:
        """Ask for an amount of RAM in whole chips within the limits."""
        self._write(f"\nHow much ram do you need?({lower_limit}GB - {upper_limit}GB): ")
        while True:
            choice = self.read_choice()
            if choice % chip_size == 0 and lower_limit <= choice <= upper_limit:
                cost = 10 * choice
                self._write(f"Cost is ${cost}\n")
                self.total_cost += cost
                return MainMemory(choice, "Silicon")
            self._write("choose a valid number\n")

    def build(self, choice: int) -> Computer | None:
        """Build the device for a menu choice; choices this assembly does not make give None."""
        builder = self._BUILDERS.get(choice)
        if builder is None:
            return None
        return getattr(self, builder)()