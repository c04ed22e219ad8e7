"""Interactive assembly of PC desktops, laptops and tablets."""

from __future__ import annotations

from typing import ClassVar, TextIO

from .assembly import ComputerAssembly
from .components import GPU, Case, IntelCPU, NetworkCard, PhysicalMemory
from .computers import Computer, PCDesktop, PCLaptop, PCTablet
from .motherboard import PCMotherBoard

_MAX_EXTRA_PORTS = 7
_PORT_OPTIONS = (("USB", 9600), ("HDMI", 12600), ("VGI", 12000))
_PARTS_ADDED = "your processor, gpu, storage, NIC and RAM have been added\n"

_DESKTOP_GPUS: tuple[tuple[str, int, int] | None, ...] = (
    ("Radeon RX 7900 GRE", 16, 300),
    ("Radeon RX 7900 XT", 20, 400),
    ("Radeon RX 7900 XTX", 24, 500),
    ("RTX 3070Ti", 8, 300),
    ("RTX 3080Ti", 12, 400),
    ("RTX 3090Ti", 24, 500),
    None,
)
_DESKTOP_GPU_MENU = (
    "\nWhich GPU do you want\n"
    "AMD\n"
    "1. Radeon RX 7900 GRE  $300\n"
    "2. Radeon RX 7900 XT  $400\n"
    "3. Radeon RX 7900 XTX  $500\n"
    "Nvidia\n"
    "4. RTX 3070Ti  $300\n"
    "5. RTX 3080Ti  $400\n"
    "6. RTX 3090Ti  $500\n"
    "7. None\n"
)

_TABLET_GPUS = (
    ("AMD Radeon RX 7900M", 16, 219),
    ("Nvidida GeForce RTX 40", 24, 329),
    ("Intel Arc Alchemist", 16, 319),
)
_TABLET_GPU_MENU = (
    "\nWhich GPU do you want\n"
    "1. AMD Radeon RX 7900M  $219\n"
    "2. Nvidida GeForce RTX 40 $329\n"
    "3. Intel Arc Alchemist $319\n\n"
)

_CPUS = (
    ("Ci3", 4, 4.6, 100),
    ("Ci5", 6, 4.5, 200),
    ("Ci7", 8, 5.0, 250),
    ("Ci9", 18, 5.0, 300),
)


def _banner(title: str) -> str:
    border = "=" * (len(title) + 4)
    return f"\n{border}\n| {title} |\n{border}\n\n"


class PCAssembly(ComputerAssembly):
    """Builds PC devices around an Intel processor and an optional GPU."""

    _BUILDERS: ClassVar[dict[int, str]] = {
        1: "build_desktop",
        2: "build_laptop",
        3: "build_tablet",
    }

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        super().__init__(stdin, stdout)
        self.motherboard: PCMotherBoard | None = None
        self.gpu: GPU | None = None
        self.cpu: IntelCPU | None = None

    def _read_port_count(self) -> int:
        while True:
            count = self.read_choice()
            if 0 <= count <= _MAX_EXTRA_PORTS:
                return count
            self._write("Please choose a valid number")

    def create_motherboard(
        self,
        device: str,
        cpu: IntelCPU,
        gpu: GPU | None,
        physical_memory: PhysicalMemory,
        network_card: NetworkCard,
    ) -> PCMotherBoard:
        """Fit a board with the given parts, asking for extra ports unless it is for a tablet."""
        self._write(
            "\nThis Motherboard already comes with the following ports:\n"
            "1. Power Connector \n2. Storage Connecter (to the secondary memory)\n"
        )
        if device == "Tablet":
            self._write(_PARTS_ADDED)
            return PCMotherBoard(cpu, gpu, physical_memory, network_card, 0)

        self._write("How many additional ports do you need ? (maximum 7): ")
        extra = self._read_port_count()
        board = PCMotherBoard(cpu, gpu, physical_memory, network_card, extra)
        if extra:
            self._write("Choose your ports\n1. USB\n2. HDMI\n3. VGI\n")
            for _ in range(extra):
                kind, baud_rate = self._pick(_PORT_OPTIONS, "Choose from the given options\n")
                board.add_port(kind, baud_rate)
        self._write(_PARTS_ADDED)
        return board

    def create_gpu(self, tablet: bool = False) -> GPU | None:
        """Offer the graphics cards and return the pick; desktops may choose none."""
        if tablet:
            self._write(_TABLET_GPU_MENU)
            picked = self._pick(_TABLET_GPUS, "Please choose form the given options\n")
        else:
            self._write(_DESKTOP_GPU_MENU)
            picked = self._pick(_DESKTOP_GPUS, "Please choose form the given options\n")
        if picked is None:
            return None
        brand, memory, price = picked
        self.total_cost += price
        return GPU(brand, memory, price)

    def create_cpu(self) -> IntelCPU:
        """Offer the Intel processors and return the pick."""
        menu = "".join(
            f"{number}. {name} ${price}\n"
            for number, (name, _, _, price) in enumerate(_CPUS, start=1)
        )
        self._write("\nWhich Processor Do you Want?\n" + menu)
        name, cores, clock, price = self._pick(_CPUS, "Choose from the given options\n")
        self.total_cost += price
        return IntelCPU(name, cores, clock)

    def _common_parts(self, tablet: bool) -> None:
        self.total_cost = 0.0
        if tablet:
            self.ram = self.create_main_memory(4, 16, 4)
        else:
            self.ram = self.create_main_memory(4, 64, 4)
        self.storage_device = self.create_storage_device(tablet)
        self.physical_memory = PhysicalMemory("DDR5", self.ram, self.storage_device)
        self.network_card = self.create_network_card()
        self.gpu = self.create_gpu(tablet)
        self.cpu = self.create_cpu()
        self.motherboard = self.create_motherboard(
            "Tablet" if tablet else "Computer",
            self.cpu,
            self.gpu,
            self.physical_memory,
            self.network_card,
        )

    def _announce_cost(self, computer: Computer) -> Computer:
        self._write(f"${computer.cost:g}\n")
        return computer

    def build_desktop(self) -> PCDesktop:
        """Assemble a PC desktop from the parts chosen on the input."""
        self._write(_banner("Building A PC Desktop"))
        self._common_parts(tablet=False)
        self._write("Your Case will cost $20\n")
        self.total_cost += 20
        color = self.choose_case_color()
        self.case = Case("ATX", color, 20)
        self.power_supply = self.create_power_supply(400, 300)
        desktop = PCDesktop(self.motherboard, self.case, self.power_supply, self.total_cost)
        self._announce_cost(desktop)
        return desktop

    def build_laptop(self) -> PCLaptop:
        """Assemble a PC laptop from the parts chosen on the input."""
        self._write(_banner("Building A PC Laptop"))
        self._common_parts(tablet=False)
        self.battery = self.create_battery(20000, 40000)
        color = self.choose_case_color()
        laptop = PCLaptop(self.motherboard, color, self.battery, self.total_cost)
        self._announce_cost(laptop)
        return laptop

    def build_tablet(self) -> PCTablet:
        """Assemble a PC tablet from the parts chosen on the input."""
        self._write(_banner("Building A PC Tablet"))
        self._common_parts(tablet=True)
        self.battery = self.create_battery(2000, 8000)
        color = self.choose_case_color()
        tablet = PCTablet(self.motherboard, color, self.battery, self.total_cost)
        self._announce_cost(tablet)
        return tablet

    def build(self, choice: int) -> Computer | None:
        """Build a desktop (1), laptop (2) or tablet (3); other choices give None."""
        return super().build(choice)