"""Bookkeeping of heap and stack usage, with an optional report table."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, TextIO

_RULE = "-------------------------------------------------"
_SEPARATOR = "|-----------------------------------------------|"


@dataclass(frozen=True)
class MemoryRecord:
    """One live heap block: the address of an object and its size in bytes."""

    address: int
    size: int


class MemoryTracker:
    """Counts allocations and releases and keeps a list of live heap blocks.

    Counting always happens; messages and the usage report are only written
    to ``out`` when ``verbose`` is true.
    """

    def __init__(self, verbose: bool = False, out: TextIO | None = None) -> None:
        self.verbose = verbose
        self.out = out if out is not None else sys.stdout
        self.heap_allocations = 0
        self.heap_deallocations = 0
        self.stack_allocations = 0
        self.stack_deallocations = 0
        self._records: list[MemoryRecord] = []

    @property
    def records(self) -> list[MemoryRecord]:
        """Live heap records, newest first."""
        return list(self._records)

    def _write(self, text: str) -> None:
        if self.verbose:
            self.out.write(text)

    def record_allocation(self, obj: Any, size: int) -> None:
        """Count a heap allocation of ``size`` bytes held by ``obj``."""
        address = id(obj)
        self.heap_allocations += 1
        self._records.insert(0, MemoryRecord(address, size))
        self._write(
            f"Memoria asignada en el heap: Puntero=0x{address:x}, Tamano={size} bytes\n"
        )

    def record_deallocation(self, obj: Any) -> None:
        """Count a heap release of ``obj`` and drop its record if present."""
        address = id(obj)
        self.heap_deallocations += 1
        for position, record in enumerate(self._records):
            if record.address == address:
                del self._records[position]
                break
        self._write(f"Memoria liberada en el heap: Puntero=0x{address:x}\n")

    def record_stack_allocation(self) -> None:
        """Count a stack allocation."""
        self.stack_allocations += 1

    def record_stack_deallocation(self) -> None:
        """Count a stack release."""
        self.stack_deallocations += 1

    def render(self) -> str:
        """Return the usage report as text."""
        lines = [
            "",
            _RULE,
            "|                   Uso de Memoria              |",
            _RULE,
            "| Segmento de Texto (Codigo)                    |",
            _SEPARATOR,
            "| Segmento de Datos (Globales y Estaticos)      |",
            _SEPARATOR,
            "| Segmento BSS (Globales y Estaticos no inicializados) |",
            _SEPARATOR,
            "| Heap (Memoria Dinamica)                       |",
            f"|   Asignaciones: {self.heap_allocations:<28d} |",
            f"|   Liberaciones: {self.heap_deallocations:<28d} |",
            _SEPARATOR,
            "| Stack (Variables Locales)                     |",
            f"|   Asignaciones: {self.stack_allocations:<28d} |",
            f"|   Liberaciones: {self.stack_deallocations:<28d} |",
            _RULE,
            "",
            _RULE,
            "|             Detalles de Memoria Heap          |",
            _RULE,
            "| Puntero          | Tamano (bytes)             |",
            _RULE,
        ]
        lines.extend(
            f"| 0x{record.address:<14x} | {record.size:<27d} |"
            for record in self._records
        )
        lines.extend([_RULE, ""])
        return "\n".join(lines) + "\n"

    def display(self) -> None:
        """Write the usage report to ``out`` when verbose."""
        self._write(self.render())