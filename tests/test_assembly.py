import io

import pytest

from rigbuilder.assembly import ComputerAssembly
from rigbuilder.components import Case
from rigbuilder.computers import Computer


def _assembly(text):
    out = io.StringIO()
    return ComputerAssembly(io.StringIO(text), out), out


def test_read_choice_skips_non_numbers():
    assembly, _ = _assembly("abc\n 2 7")
    assert assembly.read_choice() == 2
    assert assembly.read_choice() == 7


def test_read_choice_raises_at_end_of_input():
    assembly, _ = _assembly("  \n")
    with pytest.raises(EOFError):
        assembly.read_choice()


def test_storage_device_desktop_choice():
    assembly, out = _assembly("3\n")
    device = assembly.create_storage_device()
    assert (device.kind, device.capacity, device.price) == ("HDD", 1024, 200)
    assert assembly.total_cost == 200
    assert "3. 1TB HDD  for $200\n" in out.getvalue()


def test_storage_device_tablet_retries_after_bad_choice():
    assembly, out = _assembly("9 6\n")
    device = assembly.create_storage_device(True)
    assert (device.kind, device.capacity, device.price) == ("SSD", 256, 135)
    assert assembly.total_cost == 135
    assert "Please choose from the given options\n" in out.getvalue()


def test_network_card_keeps_label_from_menu():
    assembly, out = _assembly("4")
    card = assembly.create_network_card()
    assert (card.kind, card.speed, card.price) == ("EThernet", 75, 200)
    assert "4. Ethernet 75 Mbps for 200$\n" in out.getvalue()


def test_choose_case_color():
    assembly, _ = _assembly("0 2")
    assert assembly.choose_case_color() == "Silver"
    assert assembly.total_cost == 0


def test_power_supply_uses_given_wattages():
    assembly, out = _assembly("5")
    psu = assembly.create_power_supply(400, 300)
    assert (psu.wattage, psu.efficiency_rating, psu.price) == (300, "80 PLUS Silver", 80)
    assert assembly.total_cost == 80
    text = out.getvalue()
    assert "400 watt options:\n" in text
    assert "3. 80 plus gold for $140\n" in text


def test_power_supply_first_option():
    assembly, _ = _assembly("1")
    psu = assembly.create_power_supply(400, 300)
    assert (psu.wattage, psu.efficiency_rating, psu.price) == (400, "80 PLUS Bronze", 100)


def test_battery_rejects_off_step_and_out_of_range():
    assembly, out = _assembly("1000 25000 42000 20000")
    battery = assembly.create_battery(20000, 40000)
    assert battery.capacity == 20000
    assert battery.price == pytest.approx(100)
    assert assembly.total_cost == pytest.approx(100)
    assert out.getvalue().count("Choose a valid number\n") == 3
    assert "Cost is $100\n" in out.getvalue()


def test_main_memory_multiple_of_chip_size():
    assembly, out = _assembly("6 68 16")
    ram = assembly.create_main_memory(4, 64, 4)
    assert ram.capacity == 16
    assert ram.technology == "Silicon"
    assert assembly.total_cost == 160
    assert out.getvalue().count("choose a valid number\n") == 2


def test_costs_accumulate():
    assembly, _ = _assembly("1 1")
    storage = assembly.create_storage_device()
    card = assembly.create_network_card()
    assert assembly.total_cost == storage.price + card.price


def test_base_build_makes_nothing():
    assembly, _ = _assembly("")
    assert assembly.build(1) is None


class _CaseOnlyAssembly(ComputerAssembly):
    _BUILDERS = {7: "build_box"}

    def build_box(self):
        return Computer(Case("ATX", self.choose_case_color()), self.total_cost)