import pytest

from rigbuilder.components import (
    ALU,
    CPU,
    GPU,
    AppleSilicon,
    Battery,
    Case,
    ControlUnit,
    IntelCPU,
    MainMemory,
    NetworkCard,
    PhysicalMemory,
    Port,
    PowerSupply,
    StorageDevice,
)


def test_alu_defaults_are_zero():
    alu = ALU()
    assert (alu.adders, alu.subtractors, alu.registers, alu.register_size) == (0, 0, 0, 0)


def test_control_unit_holds_clock():
    cu = ControlUnit(4.5)
    assert cu.clock == 4.5
    cu.clock = 5.0
    assert cu.clock == 5.0


def test_cpu_has_64_wide_alu():
    cpu = CPU(4, 4.6, "Ci3", "x86")
    assert cpu.alu == ALU(64, 64, 64, 64)
    assert cpu.clock_speed == 4.6


def test_cpu_clock_setter_updates_control_unit():
    cpu = CPU(4, 4.6, "Ci3", "x86")
    cpu.clock_speed = 3.0
    assert cpu.control_unit.clock == 3.0


def test_gpu_describe():
    gpu = GPU("RTX 3070Ti", 8, 300)
    assert gpu.describe() == "GPU : RTX 3070Ti  size : 8GB\n"
    assert gpu.price == 300


def test_gpu_price_default():
    assert GPU("M1", 16).price == 0


def test_intel_cpu_architecture_and_describe():
    cpu = IntelCPU("Ci3", 4, 4.6)
    assert cpu.architecture == "x86"
    assert cpu.describe() == "CPU : Ci3  architecture : x86  cores : 4  clock speed 4.6MHz\n"


def test_intel_cpu_whole_clock_has_no_decimals():
    assert IntelCPU("Ci7", 8, 5).describe().endswith("clock speed 5MHz\n")


def test_apple_silicon_describe_includes_gpu():
    chip = AppleSilicon("M1", 16, 8, 3.2)
    assert chip.architecture == "ARM64"
    assert chip.gpu == GPU("M1", 16)
    assert chip.describe() == (
        "CPU : M1  architecture : ARM64  cores : 8  clock speed 3.2MHz\n"
        "GPU : M1  size : 16GB\n"
    )


def test_case_describe_and_defaults():
    assert Case("ATX", "Black", 20).describe() == "Case : ATX  Color : Black\n"
    assert Case() == Case("", "", 0)


def test_main_memory_describe():
    assert MainMemory(16, "Silicon").describe() == "RAM : 16GB   Technology : Silicon\n"


def test_storage_device_describe():
    assert StorageDevice("SSD", 512, 200).describe() == "StorageDevice : 512GB  SSD\n"


def test_network_card_describe():
    assert NetworkCard("Wifi", 15, 40).describe() == "Network Card : Wifi  speed : 15Mbps\n"


def test_power_supply_describe():
    psu = PowerSupply(400, "80 PLUS Gold", 140)
    assert psu.describe() == "Rating : 80 PLUS Gold  Wattage : 400\n"


def test_battery_is_fixed_bronze_supply():
    battery = Battery(20000, 100.0)
    assert battery.wattage == 40
    assert battery.efficiency_rating == "80 plus Bronze"
    assert battery.price == 100.0
    assert battery.capacity == 20000


def test_battery_describe():
    assert Battery(2000, 10.0).describe() == (
        "Battery capacity : 2000  Rating : 80 plus Bronze  Wattage : 40\n"
    )


def test_battery_equality_includes_capacity():
    assert Battery(2000, 10.0) != Battery(4000, 10.0)
    assert Battery(2000, 10.0) == Battery(2000, 10.0)


@pytest.mark.parametrize(
    "port, expected",
    [
        (Port("Power Connector"), "Power Connector\n"),
        (Port("USB", 9600), "USB  baud rate: 9600\n"),
        (Port("HDMI", 12600), "HDMI  baud rate: 12600\n"),
    ],
)
def test_port_describe(port, expected):
    assert port.describe() == expected


def test_physical_memory_capacity_is_sum():
    ram = MainMemory(16, "Silicon")
    storage = StorageDevice("HDD", 256, 100)
    memory = PhysicalMemory("DDR5", ram, storage)
    assert memory.capacity == ram.capacity + storage.capacity


def test_physical_memory_capacity_is_fixed_at_construction():
    ram = MainMemory(16, "Silicon")
    memory = PhysicalMemory("DDR5", ram, StorageDevice("HDD", 256, 100))
    before = memory.capacity
    ram.capacity = 32
    assert memory.capacity == before


def test_physical_memory_describe():
    ram = MainMemory(8, "Silicon")
    storage = StorageDevice("SSD", 128, 70)
    memory = PhysicalMemory("LPDDR5", ram, storage)
    assert memory.describe() == (
        "Physical Memory :LPDDR5\n" + ram.describe() + storage.describe()
    )