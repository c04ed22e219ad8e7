"""Hardware components that make up an assembled computer."""

from __future__ import annotations

from dataclasses import dataclass, field


def _format_number(value: float) -> str:
    """Render a number the way a default stream would: six significant digits."""
    return f"{value:g}"


@dataclass
class ALU:
    """Arithmetic logic unit."""

    adders: int = 0
    subtractors: int = 0
    registers: int = 0
    register_size: int = 0


@dataclass
class ControlUnit:
    """Control unit; holds the processor clock in MHz."""

    clock: float = 0.0


@dataclass
class GPU:
    """Graphics processor."""

    brand: str
    memory_size: int
    price: float = 0.0

    def describe(self) -> str:
        return f"GPU : {self.brand}  size : {self.memory_size}GB\n"


class CPU:
    """A processor with an ALU and a control unit."""

    def __init__(self, cores: int, clock_speed: float, name: str, architecture: str) -> None:
        self.cores = cores
        self.name = name
        self.architecture = architecture
        self.alu = ALU(64, 64, 64, 64)
        self.control_unit = ControlUnit(clock_speed)

    @property
    def clock_speed(self) -> float:
        return self.control_unit.clock

    @clock_speed.setter
    def clock_speed(self, value: float) -> None:
        self.control_unit.clock = value

    def _spec_line(self) -> str:
        return (
            f"CPU : {self.name}  architecture : {self.architecture}  cores : {self.cores}"
            f"  clock speed {_format_number(self.clock_speed)}MHz\n"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, cores={self.cores!r}, "
            f"clock_speed={self.clock_speed!r}, architecture={self.architecture!r})"
        )


class IntelCPU(CPU):
    """An x86 processor."""

    def __init__(self, name: str, cores: int, clock_speed: float) -> None:
        super().__init__(cores, clock_speed, name, "x86")

    def describe(self) -> str:
        return self._spec_line()


class AppleSilicon(CPU):
    """An ARM64 system on a chip with its own integrated GPU."""

    def __init__(self, name: str, capacity_size: int, cores: int, clock_speed: float) -> None:
        super().__init__(cores, clock_speed, name, "ARM64")
        self.gpu = GPU(name, capacity_size)

    def describe(self) -> str:
        return self._spec_line() + self.gpu.describe()


@dataclass
class Case:
    """Device enclosure."""

    form_factor: str = ""
    color: str = ""
    price: float = 0.0

    def describe(self) -> str:
        return f"Case : {self.form_factor}  Color : {self.color}\n"


@dataclass
class MainMemory:
    """RAM, capacity in GB."""

    capacity: int
    technology: str

    def describe(self) -> str:
        return f"RAM : {self.capacity}GB   Technology : {self.technology}\n"


@dataclass
class StorageDevice:
    """Secondary storage, capacity in GB."""

    kind: str
    capacity: int
    price: float

    def describe(self) -> str:
        return f"StorageDevice : {self.capacity}GB  {self.kind}\n"


@dataclass
class NetworkCard:
    """Network interface card, speed in Mbps."""

    kind: str
    speed: int
    price: float

    def describe(self) -> str:
        return f"Network Card : {self.kind}  speed : {self.speed}Mbps\n"


@dataclass
class PowerSupply:
    """Power supply unit."""

    wattage: int
    efficiency_rating: str
    price: float

    def describe(self) -> str:
        return f"Rating : {self.efficiency_rating}  Wattage : {self.wattage}\n"


@dataclass(init=False)
class Battery(PowerSupply):
    """A battery, capacity in mAh; always a 40 W bronze-rated supply."""

    capacity: int

    def __init__(self, capacity: int, price: float) -> None:
        super().__init__(40, "80 plus Bronze", price)
        self.capacity = capacity

    def describe(self) -> str:
        return f"Battery capacity : {self.capacity}  " + super().describe()


@dataclass
class Port:
    """A motherboard port; a baud rate of zero is not shown."""

    kind: str
    baud_rate: int = 0

    def describe(self) -> str:
        text = self.kind
        if self.baud_rate:
            text += f"  baud rate: {self.baud_rate}"
        return text + "\n"


@dataclass
class PhysicalMemory:
    """RAM and storage together; capacity is their sum at construction."""

    technology: str
    ram: MainMemory
    storage: StorageDevice
    capacity: int = field(init=False)

    def __post_init__(self) -> None:
        self.capacity = self.ram.capacity + self.storage.capacity

    def describe(self) -> str:
        return (
            f"Physical Memory :{self.technology}\n"
            + self.ram.describe()
            + self.storage.describe()
        )