"""Shapes that describe themselves, shown as a list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import astuple, dataclass, fields
from typing import TextIO


@dataclass
class Shape:
    """A shape whose description lists its parameters."""

    def describe(self) -> str:
        params = ", ".join(f"{field.name}={value}" for field, value in zip(fields(self), astuple(self)))
        return f"this is a {type(self).__name__.lower()} with the following parameters : {params}"


@dataclass
class Circle(Shape):
    radius: int

    def describe(self) -> str:
        return f"this is a circle which has a radius of: {self.radius} "


@dataclass
class Rectangle(Shape):
    left: int
    top: int
    width: int
    height: int

    def describe(self) -> str:
        return super().describe()


@dataclass
class Triangle(Shape):
    x1: int
    x2: int
    x3: int
    y1: int
    y2: int
    y3: int

    def describe(self) -> str:
        return super().describe() + " "


def display_list(shapes: Iterable[Shape], out: TextIO | None = None) -> None:
    """Write the description of each shape on its own line."""
    stream = sys.stdout if out is None else out
    for shape in shapes:
        stream.write(shape.describe() + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Display a sample list of shapes.")
    parser.parse_args(argv)
    shapes: list[Shape] = [
        Circle(4),
        Circle(7),
        Circle(1),
        Circle(2),
        Rectangle(2, 4, 6, 8),
        Triangle(2, 4, 6, 6, 4, 2),
        Circle(5),
    ]
    display_list(shapes)
    return 0