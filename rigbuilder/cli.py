"""Command-line entry point: pick a device, build it, then inspect it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .assembly import ComputerAssembly
from .computers import Computer
from .mac_assembly import MacAssembly
from .pc_assembly import PCAssembly

_DEVICE_MENU = (
    "Which Device do you want to create\n"
    "1. PC Desktop\n"
    "2. PC Laptop\n"
    "3. PC Tablet\n"
    "4. Mac Desktop\n"
    "5. Mac Laptop\n"
    "6. iPad\n"
)
_AFTER_MENU = (
    "Congrats on your Purchase\n"
    "What do you want to do now ? \n"
    "1. Display specs\n"
    "2. See Cost\n"
    "3. Go home\n"
)
_PC_CHOICES = range(1, 4)
_MAC_CHOICES = range(4, 7)


def _token_lines(stream: Iterable[str]) -> Iterator[str]:
    """One token per line, so several readers can share the stream without losing input."""
    for line in stream:
        for token in line.split():
            yield token + "\n"


def display_menu(stdin: TextIO | None = None, stdout: TextIO | None = None) -> Computer:
    """Run the whole dialogue and return the computer that was built."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    lines = _token_lines(stdin)
    menu = ComputerAssembly(lines, stdout)

    stdout.write(_DEVICE_MENU)
    while True:
        choice = menu.read_choice()
        if choice in _PC_CHOICES:
            assembly: ComputerAssembly = PCAssembly(lines, stdout)
        elif choice in _MAC_CHOICES:
            assembly = MacAssembly(lines, stdout)
        else:
            continue
        computer = assembly.build(choice)
        break

    stdout.write(_AFTER_MENU)
    while True:
        try:
            choice = menu.read_choice()
        except EOFError:
            return computer
        if choice == 1:
            stdout.write(computer.describe())
        elif choice == 2:
            stdout.write(f"Cost = ${computer.cost:g}\n")
        else:
            return computer


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rigbuilder", description="Build a computer from parts, interactively."
    )
    parser.parse_args(argv)
    try:
        display_menu(sys.stdin, sys.stdout)
    except EOFError:
        print("input ended before the device was built", file=sys.stderr)
        return 1
    return 0