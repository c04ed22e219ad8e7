"""Interactive assembly of Mac desktops, laptops and iPads."""

from __future__ import annotations

from typing import ClassVar, TextIO

from .assembly import ComputerAssembly
from .components import AppleSilicon, Case, NetworkCard, PhysicalMemory
from .computers import Computer, IPad, MacDesktop, MacLaptop
from .motherboard import AppleMotherBoard

_MAX_EXTRA_PORTS = 7
_PORT_OPTIONS = (("USB", 9600), ("HDMI", 12600), ("VGI", 12000))
_PARTS_ADDED = "your processor, gpu, storage, NIC and RAM have been added\n"

_CPUS = (
    ("M1", 16, 8, 3.2, 100),
    ("M1-Pro", 32, 10, 3.49, 200),
    ("M1-Max", 64, 10, 3.49, 300),
    ("M2", 24, 8, 3.49, 400),
    ("M2-Pro", 32, 10, 3.49, 450),
    ("M2-Max", 64, 10, 3.49, 500),
)


def _banner(title: str) -> str:
    border = "=" * (len(title) + 4)
    return f"\n{border}\n| {title} |\n{border}\n\n"


class MacAssembly(ComputerAssembly):
    """Builds Apple devices around an Apple system on a chip."""

    _BUILDERS: ClassVar[dict[int, str]] = {
        4: "build_desktop",
        5: "build_laptop",
        6: "build_tablet",
    }

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        super().__init__(stdin, stdout)
        self.motherboard: AppleMotherBoard | None = None
        self.cpu: AppleSilicon | None = None

    def _read_port_count(self) -> int:
        while True:
            count = self.read_choice()
            if 0 <= count <= _MAX_EXTRA_PORTS:
                return count
            self._write("Please choose a valid number")

    def create_motherboard(
        self,
        device: str,
        physical_memory: PhysicalMemory,
        network_card: NetworkCard,
    ) -> AppleMotherBoard:
        """Fit a board around the chosen chip, asking for extra ports unless it is for a tablet."""
        if self.cpu is None:
            raise ValueError("a processor must be chosen before the motherboard")
        self._write(
            "\nThis Motherboard already comes with the following ports:\n"
            "1. Power Connector \n2. Storage Connecter (to the secondary memory)\n3. USB\n"
        )
        if device == "Tablet":
            self._write(_PARTS_ADDED)
            return AppleMotherBoard(self.cpu, physical_memory, network_card, 0)

        self._write("How many additional ports do you need ? (maximum 7): ")
        extra = self._read_port_count()
        board = AppleMotherBoard(self.cpu, physical_memory, network_card, extra)
        if extra:
            self._write("Choose your ports\n1. USB\n2. HDMI\n3. VGI\n")
            for _ in range(extra):
                kind, baud_rate = self._pick(_PORT_OPTIONS, "Choose from the given options\n")
                board.add_port(kind, baud_rate)
        self._write(_PARTS_ADDED)
        return board

    def create_cpu(self) -> AppleSilicon:
        """Offer the Apple chips and return the pick."""
        menu = "".join(
            f"{number}. {name} {memory}GB  ${price}\n"
            for number, (name, memory, _, _, price) in enumerate(_CPUS, start=1)
        )
        self._write("\nChoose your Processor\n" + menu + "\n")
        name, memory, cores, clock, price = self._pick(_CPUS, "Choose a valid option\n")
        self.total_cost += price
        return AppleSilicon(name, memory, cores, clock)

    def _common_parts(self, tablet: bool) -> None:
        self.total_cost = 0.0
        if tablet:
            self.ram = self.create_main_memory(4, 16, 4)
        else:
            self.ram = self.create_main_memory(4, 64, 4)
        self.storage_device = self.create_storage_device(tablet)
        self.physical_memory = PhysicalMemory("LPDDR5", self.ram, self.storage_device)
        self.network_card = self.create_network_card()
        self.cpu = self.create_cpu()
        self.motherboard = self.create_motherboard(
            "Tablet" if tablet else "Computer", self.physical_memory, self.network_card
        )

    def build_desktop(self) -> MacDesktop:
        """Assemble a Mac desktop from the parts chosen on the input."""
        self._write(_banner("Building A Mac Desktop"))
        self._common_parts(tablet=False)
        self._write("Your Case will cost $20\n")
        self.total_cost += 20
        self.case = Case("ATX", self.choose_case_color(), 20)
        self.power_supply = self.create_power_supply(400, 300)
        return MacDesktop(self.motherboard, self.case, self.power_supply, self.total_cost)

    def build_laptop(self) -> MacLaptop:
        """Assemble a Mac laptop from the parts chosen on the input."""
        self._write(_banner("Building A Mac Laptop"))
        self._common_parts(tablet=False)
        self.battery = self.create_battery(20000, 40000)
        color = self.choose_case_color()
        return MacLaptop(self.motherboard, color, self.battery, self.total_cost)

    def build_tablet(self) -> IPad:
        """Assemble an iPad from the parts chosen on the input."""
        self._write(_banner("Building An iPad"))
        self._common_parts(tablet=True)
        self.battery = self.create_battery(2000, 8000)
        color = self.choose_case_color()
        return IPad(self.motherboard, color, self.battery, self.total_cost)

    def build(self, choice: int) -> Computer | None:
        """Build a desktop (4), laptop (5) or iPad (6); other choices give None."""
        return super().build(choice)