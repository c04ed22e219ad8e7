"""Motherboards that tie the components of a computer together."""

from __future__ import annotations

from .components import GPU, AppleSilicon, IntelCPU, NetworkCard, PhysicalMemory, Port

_BUILT_IN_PORTS = 3


class MotherBoard:
    """A board with three built-in ports and room for a number of extra ones."""

    def __init__(
        self,
        physical_memory: PhysicalMemory,
        network_card: NetworkCard,
        extra_ports: int,
    ) -> None:
        if extra_ports < 0:
            raise ValueError("number of extra ports cannot be negative")
        self.physical_memory = physical_memory
        self.network_card = network_card
        self.num_ports = extra_ports + _BUILT_IN_PORTS
        self.ports: list[Port] = [
            Port("Power Connector"),
            Port("Storage Connector"),
            Port("USB", 9600),
        ]

    def add_port(self, port_type: str, baud_rate: int) -> Port:
        """Fit the next free slot with a port and return it."""
        if len(self.ports) >= self.num_ports:
            raise ValueError(f"all {self.num_ports} port slots are already fitted")
        port = Port(port_type, baud_rate)
        self.ports.append(port)
        return port

    def describe(self) -> str:
        lines = [
            self.physical_memory.describe(),
            self.network_card.describe(),
            f"Num of Ports : {self.num_ports}\n",
        ]
        lines.extend(port.describe() for port in self.ports)
        return "".join(lines)


class PCMotherBoard(MotherBoard):
    """A PC board with an Intel processor and an optional discrete GPU."""

    def __init__(
        self,
        cpu: IntelCPU,
        gpu: GPU | None,
        physical_memory: PhysicalMemory,
        network_card: NetworkCard,
        extra_ports: int,
    ) -> None:
        super().__init__(physical_memory, network_card, extra_ports)
        self.cpu = cpu
        self.gpu = gpu

    def describe(self) -> str:
        text = self.cpu.describe()
        if self.gpu is not None:
            text += self.gpu.describe()
        return text + super().describe()


class AppleMotherBoard(MotherBoard):
    """A board carrying an Apple system on a chip."""

    def __init__(
        self,
        cpu: AppleSilicon,
        physical_memory: PhysicalMemory,
        network_card: NetworkCard,
        extra_ports: int,
    ) -> None:
        super().__init__(physical_memory, network_card, extra_ports)
        self.cpu = cpu

    def describe(self) -> str:
        return self.cpu.describe() + super().describe()