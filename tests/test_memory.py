import io

from biblioteca.memory import MemoryTracker


def test_counts_start_at_zero():
    tracker = MemoryTracker()
    assert (
        tracker.heap_allocations,
        tracker.heap_deallocations,
        tracker.stack_allocations,
        tracker.stack_deallocations,
    ) == (0, 0, 0, 0)
    assert tracker.records == []


def test_allocation_adds_record_newest_first():
    tracker = MemoryTracker()
    first, second = object(), object()
    tracker.record_allocation(first, 10)
    tracker.record_allocation(second, 20)
    assert tracker.heap_allocations == 2
    assert [r.address for r in tracker.records] == [id(second), id(first)]
    assert [r.size for r in tracker.records] == [20, 10]


def test_deallocation_removes_record():
    tracker = MemoryTracker()
    first, second = object(), object()
    tracker.record_allocation(first, 10)
    tracker.record_allocation(second, 20)
    tracker.record_deallocation(first)
    assert tracker.heap_deallocations == 1
    assert [r.address for r in tracker.records] == [id(second)]


def test_deallocation_of_unknown_object_still_counts():
    tracker = MemoryTracker()
    kept = object()
    tracker.record_allocation(kept, 5)
    tracker.record_deallocation(None)
    assert tracker.heap_deallocations == 1
    assert len(tracker.records) == 1


def test_stack_counters():
    tracker = MemoryTracker()
    tracker.record_stack_allocation()
    tracker.record_stack_allocation()
    tracker.record_stack_deallocation()
    assert tracker.stack_allocations == 2
    assert tracker.stack_deallocations == 1


def test_render_contains_counts_and_records():
    tracker = MemoryTracker()
    block = object()
    tracker.record_allocation(block, 248)
    report = tracker.render()
    assert "|                   Uso de Memoria              |" in report
    assert "| Puntero          | Tamano (bytes)             |" in report
    assert f"0x{id(block):x}" in report
    assert "248" in report
    assert f"|   Asignaciones: {1:<28d} |" in report


def test_display_silent_when_not_verbose():
    out = io.StringIO()
    tracker = MemoryTracker(verbose=False, out=out)
    tracker.record_allocation(object(), 8)
    tracker.display()
    assert out.getvalue() == ""


def test_display_writes_report_when_verbose():
    out = io.StringIO()
    tracker = MemoryTracker(verbose=True, out=out)
    tracker.display()
    assert out.getvalue() == tracker.render()


def test_verbose_messages_on_allocation_and_release():
    out = io.StringIO()
    tracker = MemoryTracker(verbose=True, out=out)
    block = object()
    tracker.record_allocation(block, 16)
    tracker.record_deallocation(block)
    text = out.getvalue()
    assert f"Memoria asignada en el heap: Puntero=0x{id(block):x}, Tamano=16 bytes" in text
    assert f"Memoria liberada en el heap: Puntero=0x{id(block):x}" in text