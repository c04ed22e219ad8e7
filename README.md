# rigbuilder

rigbuilder is a small interactive console shop. You pick a device, choose its
parts one at a time, and then look at the finished machine's specifications
and total price.

## Devices

1. PC Desktop
2. PC Laptop
3. PC Tablet
4. Mac Desktop
5. Mac Laptop
6. iPad

Every device asks for the following, in this order:

- RAM, in multiples of 4 GB. Desktops and laptops take 4–64 GB and tablets
  take 4–16 GB. RAM costs $10 per GB.
- A storage device, HDD or SSD. Tablets are offered smaller drives.
- A network card.
- On PCs, a graphics card. Desktops and laptops may also choose "None".
  Tablets choose from a separate, smaller list.
- A processor. PCs use Intel chips. Macs use Apple chips, and each Apple chip
  has its own GPU.
- Extra motherboard ports, at most 7, each USB, HDMI or VGI. Tablets get no
  extra ports and are not asked for any.
- For desktops, a $20 case, a case colour and a power supply (400 W or 300 W,
  bronze, silver or gold).
- For laptops and tablets, a battery and then a case colour. The battery is
  chosen in steps of 2000 mAh: 20000–40000 mAh for laptops and 2000–8000 mAh
  for tablets. It costs $0.005 per mAh.

Each choice adds its price to the running total.

## Running

Install the package and start the shop:

```
pip install .
rigbuilder
```

Answer each prompt with a number. Input that is not a number is ignored. An
answer that is out of range prints a message and the prompt waits for another
answer. At the device menu, an out-of-range answer is ignored without a
message.

When the device is built you can choose:

1. Display specs
2. See cost
3. Go home

Any answer other than 1 or 2 ends the session. If the input runs out before
the device is built, the command prints a message on standard error and exits
with status 1.

## Using it from Python

- **Parts.** The parts are plain classes in `rigbuilder.components`: `CPU`,
  `IntelCPU`, `AppleSilicon`, `GPU`, `MainMemory`, `StorageDevice`,
  `PhysicalMemory`, `NetworkCard`, `PowerSupply`, `Battery`, `Port` and
  `Case`.
- **Motherboards.** The boards are in `rigbuilder.motherboard`:
  `MotherBoard`, `PCMotherBoard` and `AppleMotherBoard`. A board comes with
  three built-in ports. `add_port()` fills the extra slots and raises
  `ValueError` once they are all taken.
- **Finished machines.** These are in `rigbuilder.computers`: `PCDesktop`,
  `PCLaptop`, `PCTablet`, `MacDesktop`, `MacLaptop` and `IPad`. Each has a
  `cost` attribute.

Every part, board and machine has a `describe()` method that returns its spec
text as a string.

To run the whole dialogue on your own streams, call
`rigbuilder.cli.display_menu(stdin, stdout)`. It returns the computer that was
built:

```python
import io
from rigbuilder.cli import display_menu

# PC tablet, 8 GB RAM, 64GB HDD, 15 Mbps Wifi, Radeon RX 7900M, Ci3,
# 4000 mAh battery, black case; then show the cost and go home.
answers = "3 8 1 1 1 1 4000 1 2 3"
out = io.StringIO()
computer = display_menu(io.StringIO(answers), out)
print(computer.cost)  # 489
```

To build one device without the device menu, use `PCAssembly` (in
`rigbuilder.pc_assembly`) or `MacAssembly` (in `rigbuilder.mac_assembly`).
Pass them input and output streams, then call one of:

- `build_desktop()`
- `build_laptop()`
- `build_tablet()`
- `build(choice)`, which takes the device-menu number.

`build(choice)` returns `None` for a number that the assembly does not build.

## Limits

Builds exist only for the length of a session. Nothing is saved, and there is
no way to change a part after it has been chosen.

## Tests

```
pip install .[test]
pytest
```